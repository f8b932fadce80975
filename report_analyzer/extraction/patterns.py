"""Regular expressions and small parsing helpers shared by the strategies."""

import re
from dataclasses import dataclass

from report_analyzer.knowledge.models import ReferenceRange, Status

_WORD = r"[A-Za-z][A-Za-z0-9]*"
_NAME = r"(" + _WORD + r"(?:[- ]" + _WORD + r")*)"
_NUMBER = r"([0-9.]+)"
_UNIT = r"([A-Za-z/%µμ]*)"
_RANGE_SEP = r"\s*(?:-|–|—|to)\s*"

# Order matters: the first pattern that matches a line decides the candidate.
LINE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(_NAME + r"\s*[:=]\s*" + _NUMBER + r"\s*" + _UNIT, re.IGNORECASE),
    re.compile(
        _NAME + r"\s*(?:level|result|value|count)[:=\s]+" + _NUMBER + r"\s*" + _UNIT,
        re.IGNORECASE,
    ),
    re.compile(_NAME + r"\s+" + _NUMBER + r"\s*" + _UNIT, re.IGNORECASE),
)

REFERENCE_RANGE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"reference(?:\s*range)?[:=\s]+" + _NUMBER + _RANGE_SEP + _NUMBER, re.IGNORECASE),
    re.compile(r"normal(?:\s*range)?[:=\s]+" + _NUMBER + _RANGE_SEP + _NUMBER, re.IGNORECASE),
    re.compile(r"range[:=\s]+" + _NUMBER + _RANGE_SEP + _NUMBER, re.IGNORECASE),
    re.compile(r"\(\s*" + _NUMBER + _RANGE_SEP + _NUMBER + r"[^()]*\)", re.IGNORECASE),
)

# Two to four pipe-delimited cells; text before the first or after the last pipe is ignored.
TABLE_SEGMENT_RE = re.compile(r"\|([^|\n]+)\|([^|\n]+)\|(?:([^|\n]+)\|)?(?:([^|\n]+)\|)?")
VALUE_CELL_RE = re.compile(_NUMBER + r"\s*" + _UNIT)

_HIGH_CUE_RE = re.compile(r"\b(?:high|elevated|above)", re.IGNORECASE)
_LOW_CUE_RE = re.compile(r"\b(?:low|decreased|below)", re.IGNORECASE)
_RULE_LINE_RE = re.compile(r"[-=|\s]+")
_MARKDOWN_NOISE_RE = re.compile(r"[*`]+")
_LEADING_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+")


@dataclass(frozen=True)
class Candidate:
    """Name, number and unit captured by one of the line patterns."""

    name: str
    value: float
    unit: str
    name_span: tuple[int, int] = (0, 0)


def parse_number(raw: str) -> float | None:
    """Read the leading number of a captured run.

    ``"4.2."`` at the end of a sentence reads as 4.2 and ``"1.2.3"`` as 1.2.
    ``None`` only when the run has no leading number, as in ``"."`` or ``"..."``.
    """
    match = _LEADING_NUMBER_RE.match(raw)
    if match is None:
        return None
    return float(match.group())


def strip_markdown(text: str) -> str:
    """Drop emphasis and code markers so ``**Glucose**: 90`` reads as ``Glucose: 90``."""
    return _MARKDOWN_NOISE_RE.sub("", text)


def status_from_cues(text: str) -> Status:
    """Status implied by wording alone; high cues win over low cues."""
    if _HIGH_CUE_RE.search(text):
        return Status.HIGH
    if _LOW_CUE_RE.search(text):
        return Status.LOW
    return Status.NORMAL


def find_reference_range(text: str) -> ReferenceRange | None:
    """Return the first well-formed ``min-max`` interval stated in *text*."""
    for pattern in REFERENCE_RANGE_PATTERNS:
        match = pattern.search(text)
        if match is None:
            continue
        low = parse_number(match.group(1))
        high = parse_number(match.group(2))
        if low is None or high is None or low > high:
            continue
        return ReferenceRange(min=low, max=high)
    return None


def is_data_line(line: str) -> bool:
    """False for short lines, rule lines and single-token lines."""
    stripped = line.strip()
    if len(stripped) < 5:
        return False
    if _RULE_LINE_RE.fullmatch(stripped):
        return False
    return len(stripped.split()) >= 2


def match_line(text: str) -> Candidate | None:
    """Apply the line patterns in order; the first matching pattern decides.

    A match whose number does not parse discards the candidate instead of
    falling through to the next pattern.
    """
    for pattern in LINE_PATTERNS:
        match = pattern.search(text)
        if match is None:
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


def without_span(text: str, span: tuple[int, int]) -> str:
    """*text* with the characters in *span* blanked out."""
    start, end = span
    return text[:start] + " " * (end - start) + text[end:]
