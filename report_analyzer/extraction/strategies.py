import re
from collections.abc import Set

from report_analyzer.extraction.base import ExtractionStrategy
from report_analyzer.extraction.models import ParameterValue
from report_analyzer.extraction.patterns import (
    LINE_PATTERNS,
    TABLE_SEGMENT_RE,
    VALUE_CELL_RE,
    Candidate,
    find_reference_range,
    is_data_line,
    match_line,
    parse_number,
    status_from_cues,
    strip_markdown,
    without_span,
)
from report_analyzer.knowledge.models import KnownParameter
from report_analyzer.knowledge.parameters import (
    PARAMETER_INFO,
    REFERENCE_RANGES,
    classify_parameter,
    get_reference_range,
)

_PROXIMITY_RADIUS = 100


class TableRowStrategy(ExtractionStrategy):
    """Pass 1: markdown rows ``| name | value unit | ... |``.

    The first two-to-four cell segment on a line is the row, so trailing
    notes and a missing closing pipe do not hide it. Cell 1 names the
    parameter and cell 2 holds the value. Status comes from cue words after
    the name cell unless the line states its own range. Rows whose value cell
    has no number (headers, ``---`` rules) are dropped.
    """

    name = "table"

    def extract(self, text: str, found: Set[str]) -> list[ParameterValue]:
        seen = set(found)
        results: list[ParameterValue] = []
        for line in text.splitlines():
            value = self._parse_row(line)
            if value is None or value.parameter in seen:
                continue
            seen.add(value.parameter)
            results.append(value)
        return results

    def _parse_row(self, line: str) -> ParameterValue | None:
        row = TABLE_SEGMENT_RE.search(line)
        if row is None:
            return None
        raw_name = strip_markdown(row.group(1)).strip()
        if not raw_name:
            return None
        value_match = VALUE_CELL_RE.search(row.group(2))
        if value_match is None:
            return None
        number = parse_number(value_match.group(1))
        if number is None:
            return None

        rest = strip_markdown(line[row.end(1):])
        reference_range = find_reference_range(rest)
        if reference_range is not None:
            status = reference_range.classify(number)
        else:
            status = status_from_cues(rest)

        return ParameterValue(
            parameter=classify_parameter(raw_name).key,
            name=raw_name,
            value=number,
            unit=value_match.group(2) or "",
            status=status,
            reference_range=reference_range,
        )


class LinePatternStrategy(ExtractionStrategy):
    """Pass 2: one candidate per line, ``Name: 12 unit`` and its variants.

    A range stated on the line wins; otherwise a known parameter gets its
    knowledge-base range. Whenever a range is attached the status is derived
    from it and wording cues are ignored.
    """

    name = "line"

    def extract(self, text: str, found: Set[str]) -> list[ParameterValue]:
        seen = set(found)
        results: list[ParameterValue] = []
        for line in text.splitlines():
            if not is_data_line(line):
                continue
            cleaned = strip_markdown(line)
            candidate = match_line(cleaned)
            if candidate is None:
                continue
            match = classify_parameter(candidate.name)
            if match.key in seen:
                continue

            reference_range = find_reference_range(cleaned)
            if reference_range is None and isinstance(match, KnownParameter):
                reference_range = get_reference_range(match.key)
            if reference_range is not None:
                status = reference_range.classify(candidate.value)
            else:
                status = status_from_cues(without_span(cleaned, candidate.name_span))

            seen.add(match.key)
            results.append(
                ParameterValue(
                    parameter=match.key,
                    name=candidate.name,
                    value=candidate.value,
                    unit=candidate.unit,
                    status=status,
                    reference_range=reference_range,
                )
            )
        return results


class KnownParameterStrategy(ExtractionStrategy):
    """Pass 3: look around the first mention of each still-missing known parameter."""

    name = "proximity"

    def __init__(self, radius: int = _PROXIMITY_RADIUS) -> None:
        self._radius = radius

    def extract(self, text: str, found: Set[str]) -> list[ParameterValue]:
        results: list[ParameterValue] = []
        for key, info in PARAMETER_INFO.items():
            if key in found:
                continue
            mention = re.search(re.escape(info.name), text, re.IGNORECASE)
            if mention is None:
                continue
            start = max(0, mention.start() - self._radius)
            end = min(len(text), mention.end() + self._radius)
            candidate = self._match_window(strip_markdown(text[start:end]), key)
            if candidate is None:
                continue

            reference_range = REFERENCE_RANGES[key]
            results.append(
                ParameterValue(
                    parameter=key,
                    name=info.name,
                    value=candidate.value,
                    unit=candidate.unit or reference_range.unit,
                    status=reference_range.classify(candidate.value),
                    reference_range=reference_range,
                )
            )
        return results

    @staticmethod
    def _match_window(window: str, key: str) -> Candidate | None:
        """First pattern match in *window* not naming a different known parameter.

        ``HDL Cholesterol: 45`` sits next to the word "Cholesterol" but is not
        a cholesterol value.
        """
        for pattern in LINE_PATTERNS:
            for match in pattern.finditer(window):
                claimed = classify_parameter(match.group(1))
                if isinstance(claimed, KnownParameter) and claimed.key != key:
                    continue
                value = parse_number(match.group(2))
                if value is None:
                    return None
                return Candidate(
                    name=match.group(1).strip(),
                    value=value,
                    unit=(match.group(3) or "").strip(),
                    name_span=match.span(1),
                )
        return None


def default_strategies() -> list[ExtractionStrategy]:
    return [TableRowStrategy(), LinePatternStrategy(), KnownParameterStrategy()]
