from report_analyzer.scoring.models import HealthStatus

EXCELLENT_THRESHOLD = 85.0
GOOD_THRESHOLD = 70.0
FAIR_THRESHOLD = 50.0

EXCELLENT = HealthStatus(
    label="Excellent",
    color="#22c55e",
    summary="Your results are looking great! All parameters are within optimal ranges.",
)
GOOD = HealthStatus(
    label="Good",
    color="#84cc16",
    summary="Your results are good overall with just a few parameters to keep an eye on.",
    follow_up="3-6 months",
)
FAIR = HealthStatus(
    label="Fair",
    color="#eab308",
    summary=(
        "Some important parameters need attention. Consider discussing with your "
        "healthcare provider."
    ),
    follow_up="1-2 months",
)
NEEDS_ATTENTION = HealthStatus(
    label="Needs Attention",
    color="#ef4444",
    summary=(
        "Several key parameters are outside normal ranges. We recommend consulting "
        "with your healthcare provider soon."
    ),
    follow_up="1-2 weeks",
)


def get_health_status(score: float) -> HealthStatus:
    """Map a 0-100 health score onto its fixed presentation band."""
    if score >= EXCELLENT_THRESHOLD:
        return EXCELLENT
    if score >= GOOD_THRESHOLD:
        return GOOD
    if score >= FAIR_THRESHOLD:
        return FAIR
    return NEEDS_ATTENTION
