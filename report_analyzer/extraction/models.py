from dataclasses import dataclass

from report_analyzer.knowledge.models import ReferenceRange, Status


@dataclass(frozen=True)
class ParameterValue:
    """A single parameter measurement discovered in report text."""

    parameter: str
    name: str
    value: float
    unit: str
    status: Status
    reference_range: ReferenceRange | None = None

    @property
    def is_abnormal(self) -> bool:
        return self.status is not Status.NORMAL

    def to_dict(self) -> dict[str, object]:
        """Presentation shape; ``referenceRange`` is omitted when unknown."""
        data: dict[str, object] = {
            "parameter": self.parameter,
            "name": self.name,
            "value": self.value,
            "unit": self.unit,
            "status": self.status.value,
        }
        if self.reference_range is not None:
            data["referenceRange"] = {
                "min": self.reference_range.min,
                "max": self.reference_range.max,
            }
        return data
