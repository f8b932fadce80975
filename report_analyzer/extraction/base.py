from abc import ABC, abstractmethod
from collections.abc import Set

from report_analyzer.extraction.models import ParameterValue


class ExtractionStrategy(ABC):
    """Contract for one extraction pass over report text."""

    name: str = "strategy"

    @abstractmethod
    def extract(self, text: str, found: Set[str]) -> list[ParameterValue]:
        """Discover parameters in *text*.

        Args:
            text: Raw report text (markdown).
            found: Parameter keys recorded by earlier passes; never mutated.

        Returns:
            New ParameterValue records in discovery order, none of whose
            ``parameter`` keys appear in *found* or repeat within the result.
        """
