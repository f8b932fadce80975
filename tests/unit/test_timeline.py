import pytest

from report_analyzer.knowledge.models import Status
from report_analyzer.reports.models import Report
from report_analyzer.reports.timeline import (
    KeyParameter,
    build_timeline,
    compare_key_parameters,
    extract_key_parameters,
)


def _report(report_id: str, upload_date: str, raw_report: str) -> Report:
    return Report(
        id=report_id,
        user_id="user-1",
        filename=f"{report_id}.pdf",
        upload_date=upload_date,
        raw_report=raw_report,
    )


class TestExtractKeyParameters:
    def test_reads_value_after_colon(self) -> None:
        params = extract_key_parameters("Glucose: 110 mg/dL (elevated)\nLDL: 90 mg/dL")
        assert params == [
            KeyParameter(name="Glucose", value="110", status=Status.HIGH),
            KeyParameter(name="Ldl", value="90", status=Status.NORMAL),
        ]

    def test_missing_value(self) -> None:
        params = extract_key_parameters("Glucose was decreased")
        assert params == [KeyParameter(name="Glucose", value="N/A", status=Status.LOW)]
        assert params[0].numeric_value is None

    def test_at_most_three(self) -> None:
        text = "glucose: 1\ncholesterol: 2\nhdl: 3\nldl: 4\ntriglycerides: 5"
        params = extract_key_parameters(text)
        assert [p.name for p in params] == ["Glucose", "Cholesterol", "Hdl"]

    def test_nothing_relevant(self) -> None:
        assert extract_key_parameters("TSH: 2.0") == []


class TestCompareKeyParameters:
    def test_directions(self) -> None:
        current = [
            KeyParameter("Glucose", "110", Status.HIGH),
            KeyParameter("Cholesterol", "150", Status.NORMAL),
            KeyParameter("Hdl", "51", Status.NORMAL),
        ]
        previous = [
            KeyParameter("Glucose", "100", Status.NORMAL),
            KeyParameter("Cholesterol", "200", Status.NORMAL),
            KeyParameter("Hdl", "50", Status.NORMAL),
        ]
        trends = {t.name: t for t in compare_key_parameters(current, previous)}
        assert trends["Glucose"].direction == "up"
        assert trends["Glucose"].percent_diff == pytest.approx(10)
        assert trends["Cholesterol"].direction == "down"
        assert trends["Cholesterol"].diff == pytest.approx(-50)
        assert trends["Hdl"].direction == "flat"

    def test_skips_unmatched_and_non_numeric(self) -> None:
        current = [KeyParameter("Glucose", "N/A", Status.NORMAL), KeyParameter("Ldl", "90", Status.NORMAL)]
        previous = [KeyParameter("Glucose", "100", Status.NORMAL)]
        assert compare_key_parameters(current, previous) == []

    def test_skips_zero_baseline(self) -> None:
        current = [KeyParameter("Glucose", "90", Status.NORMAL)]
        previous = [KeyParameter("Glucose", "0", Status.NORMAL)]
        assert compare_key_parameters(current, previous) == []


class TestBuildTimeline:
    def test_newest_first_with_previous_link(self) -> None:
        older = _report("r1", "2025-01-01T08:00:00+00:00", "Glucose: 100")
        newer = _report("r2", "2025-02-01T08:00:00Z", "Glucose: 120")
        entries = build_timeline([older, newer])
        assert [e.report.id for e in entries] == ["r2", "r1"]
        assert entries[0].previous_report is older
        assert entries[0].trends[0].direction == "up"
        assert entries[1].previous_report is None
        assert entries[1].trends == []

    def test_naive_dates_are_utc(self) -> None:
        naive = _report("r1", "2025-01-01T08:00:00", "Glucose: 100")
        aware = _report("r2", "2025-01-01T09:00:00+00:00", "Glucose: 100")
        entries = build_timeline([aware, naive])
        assert [e.report.id for e in entries] == ["r2", "r1"]

    def test_empty(self) -> None:
        assert build_timeline([]) == []
