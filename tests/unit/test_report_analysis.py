import pytest

from report_analyzer.extraction.models import ParameterValue
from report_analyzer.knowledge.models import Status
from report_analyzer.reports.analysis import (
    analyze_report,
    describe_parameter,
    determine_health_status,
)
from report_analyzer.reports.models import Report
from report_analyzer.scoring.bands import EXCELLENT, GOOD

REPORT_TEXT = "| Glucose | 110 mg/dL | High |\nCholesterol: 180 mg/dL\n"


def _report(raw_report: str = REPORT_TEXT) -> Report:
    return Report(
        id="report-1",
        user_id="user-1",
        filename="labs.pdf",
        upload_date="2025-03-01T10:00:00+00:00",
        raw_report=raw_report,
        health_status="needsAttention",
        file_type="pdf",
    )


class TestDetermineHealthStatus:
    @pytest.mark.parametrize(
        "text",
        ["Glucose is HIGH", "slightly elevated", "Critical finding", "decreased iron"],
    )
    def test_attention_words(self, text: str) -> None:
        assert determine_health_status(text) == "needsAttention"

    def test_plain_text_is_normal(self) -> None:
        assert determine_health_status("Everything is fine.") == "normal"

    def test_substring_match(self) -> None:
        assert determine_health_status("Please follow up next year") == "needsAttention"


class TestDescribeParameter:
    def test_known_key(self) -> None:
        value = ParameterValue("tsh", "TSH", 2.0, "mIU/L", Status.NORMAL)
        assert describe_parameter(value).startswith("Thyroid Stimulating Hormone")

    def test_unknown_parameter_gets_generic_text(self) -> None:
        value = ParameterValue("ferritin", "Ferritin", 80, "ng/mL", Status.NORMAL)
        assert describe_parameter(value).startswith(
            "Ferritin is a blood test parameter"
        )


class TestAnalyzeReport:
    def test_accepts_report_or_text(self) -> None:
        assert analyze_report(_report()) == analyze_report(REPORT_TEXT)

    def test_score_and_band(self) -> None:
        analysis = analyze_report(REPORT_TEXT)
        assert [value.parameter for value in analysis.parameters] == ["cholesterol", "glucose"]
        assert analysis.health_score == pytest.approx(75)
        assert analysis.health_status is GOOD
        assert analysis.status_counts == {Status.NORMAL: 1, Status.HIGH: 1, Status.LOW: 0}

    def test_chart_data_matches_parameters(self) -> None:
        analysis = analyze_report(REPORT_TEXT)
        assert [item.name for item in analysis.chart_data] == ["Cholesterol", "Glucose"]
        assert [item.normalized_value for item in analysis.chart_data] == [100, 50]

    def test_empty_report(self) -> None:
        analysis = analyze_report("No numbers here.")
        assert analysis.parameters == []
        assert analysis.health_score == 100
        assert analysis.health_status is EXCELLENT

    def test_to_dict(self) -> None:
        payload = analyze_report(REPORT_TEXT).to_dict()
        assert payload["healthScore"] == pytest.approx(75)
        assert payload["healthStatus"]["label"] == "Good"
        assert payload["healthStatus"]["followUp"] == "3-6 months"
        assert payload["statusCounts"] == {"normal": 1, "high": 1, "low": 0}
        cholesterol = payload["parameters"][0]
        assert cholesterol["parameter"] == "cholesterol"
        assert cholesterol["referenceRange"] == {"min": 125, "max": 200}
        assert cholesterol["description"].startswith("Cholesterol is a fatty substance")
        assert payload["chartData"][1]["normalizedValue"] == 50
