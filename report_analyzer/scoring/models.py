from dataclasses import dataclass

from report_analyzer.knowledge.models import Status


@dataclass(frozen=True)
class ChartDataItem:
    """One bar/gauge entry: a parameter value plus its 0-100 normalized score."""

    name: str
    value: float
    unit: str
    status: Status
    normalized_value: float

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "value": self.value,
            "unit": self.unit,
            "status": self.status.value,
            "normalizedValue": self.normalized_value,
        }


@dataclass(frozen=True)
class HealthStatus:
    """Presentation band for a health score."""

    label: str
    color: str
    summary: str
    follow_up: str | None = None
