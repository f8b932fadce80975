from dataclasses import dataclass
from enum import Enum


class Status(str, Enum):
    """Classification of a measured value against its normal interval."""

    NORMAL = "normal"
    HIGH = "high"
    LOW = "low"


@dataclass(frozen=True)
class ParameterInfo:
    """Canonical entry for a known blood parameter."""

    key: str
    name: str
    description: str


@dataclass(frozen=True)
class ReferenceRange:
    """Clinically normal interval for a parameter.

    Ranges parsed from report text carry no unit.
    """

    min: float
    max: float
    unit: str = ""

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def classify(self, value: float) -> Status:
        if value > self.max:
            return Status.HIGH
        if value < self.min:
            return Status.LOW
        return Status.NORMAL


@dataclass(frozen=True)
class KnownParameter:
    """A name that resolved to a knowledge-base entry."""

    key: str
    raw_name: str

    @property
    def is_known(self) -> bool:
        return True


@dataclass(frozen=True)
class UnrecognizedParameter:
    """A name with no knowledge-base entry; keeps its derived key for good."""

    key: str
    raw_name: str

    @property
    def is_known(self) -> bool:
        return False


ParameterMatch = KnownParameter | UnrecognizedParameter
