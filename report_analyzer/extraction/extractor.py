"""Parameter extraction from free-form report markdown.

Passes run in a fixed order over the same text. Each pass only sees the keys
recorded by the passes before it, so the first pass to claim a key wins and
no key appears twice in the result.
"""

from collections.abc import Sequence

from report_analyzer.extraction.base import ExtractionStrategy
from report_analyzer.extraction.models import ParameterValue
from report_analyzer.extraction.strategies import default_strategies
from report_analyzer.logging.logger import Log


class ParameterExtractor:
    """Runs extraction strategies in sequence and merges their results."""

    def __init__(self, strategies: Sequence[ExtractionStrategy] | None = None) -> None:
        self._strategies = (
            list(strategies) if strategies is not None else default_strategies()
        )

    def extract(self, text: str) -> list[ParameterValue]:
        """Return the parameters found in *text*, sorted by name."""
        if not text:
            return []

        found: set[str] = set()
        results: list[ParameterValue] = []
        for strategy in self._strategies:
            discovered = [
                value for value in strategy.extract(text, frozenset(found))
                if value.parameter not in found
            ]
            for value in discovered:
                found.add(value.parameter)
            results.extend(discovered)
            Log.debug(f"Extraction pass '{strategy.name}' found {len(discovered)} parameters")

        return sorted(results, key=lambda value: value.name)


_DEFAULT_EXTRACTOR = ParameterExtractor()


def extract_parameter_values(raw_report_text: str) -> list[ParameterValue]:
    """Extract structured parameter values from raw report text."""
    return _DEFAULT_EXTRACTOR.extract(raw_report_text)
