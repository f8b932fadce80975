"""Tests for the parameter knowledge base."""

import pytest

from report_analyzer.knowledge.models import (
    KnownParameter,
    ReferenceRange,
    Status,
    UnrecognizedParameter,
)
from report_analyzer.knowledge.parameters import (
    PARAMETER_INFO,
    REFERENCE_RANGES,
    classify_parameter,
    find_parameter,
    get_parameter_description,
    get_reference_range,
    known_keys,
    normalize_key,
)


class TestTables:
    def test_has_fifteen_parameters(self) -> None:
        assert len(PARAMETER_INFO) == 15

    def test_every_parameter_has_a_reference_range(self) -> None:
        assert set(PARAMETER_INFO) == set(REFERENCE_RANGES)

    def test_ranges_are_well_formed(self) -> None:
        for rng in REFERENCE_RANGES.values():
            assert rng.min <= rng.max
            assert rng.unit

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            PARAMETER_INFO["iron"] = PARAMETER_INFO["glucose"]  # type: ignore[index]
        with pytest.raises(TypeError):
            REFERENCE_RANGES["iron"] = ReferenceRange(min=1, max=2)  # type: ignore[index]

    def test_known_keys_keep_table_order(self) -> None:
        keys = known_keys()
        assert keys[0] == "glucose"
        assert keys[-1] == "ast"

    def test_glucose_range(self) -> None:
        assert get_reference_range("glucose") == ReferenceRange(min=70, max=100, unit="mg/dL")

    def test_unknown_range_is_none(self) -> None:
        assert get_reference_range("ferritin") is None


class TestFindParameter:
    def test_matches_key(self) -> None:
        info = find_parameter("hdl")
        assert info is not None
        assert info.name == "HDL Cholesterol"

    def test_matches_display_name_case_insensitively(self) -> None:
        info = find_parameter("white blood cell COUNT")
        assert info is not None
        assert info.key == "wbc"

    def test_unknown_returns_none(self) -> None:
        assert find_parameter("Vitamin D") is None

    def test_partial_name_is_unknown(self) -> None:
        assert find_parameter("ALT") is not None
        assert find_parameter("Alanine Transaminase") is None


class TestNormalizeKey:
    def test_lowercases_and_replaces_separators(self) -> None:
        assert normalize_key("LDL Cholesterol") == "ldl_cholesterol"
        assert normalize_key("Non-HDL") == "non_hdl"

    def test_trims_outer_whitespace(self) -> None:
        assert normalize_key("  Glucose ") == "glucose"


class TestClassifyParameter:
    def test_known_by_key(self) -> None:
        match = classify_parameter("Glucose")
        assert match == KnownParameter(key="glucose", raw_name="Glucose")
        assert match.is_known

    def test_known_by_display_name_uses_canonical_key(self) -> None:
        match = classify_parameter("HDL Cholesterol")
        assert isinstance(match, KnownParameter)
        assert match.key == "hdl"

    def test_unrecognized_keeps_derived_key(self) -> None:
        match = classify_parameter("Vitamin D")
        assert match == UnrecognizedParameter(key="vitamin_d", raw_name="Vitamin D")
        assert not match.is_known


class TestGetParameterDescription:
    def test_known_key(self) -> None:
        assert get_parameter_description("sodium").startswith("Sodium helps maintain")

    def test_known_name(self) -> None:
        assert get_parameter_description("TSH").startswith("Thyroid Stimulating Hormone")

    def test_unknown_uses_generic_template(self) -> None:
        assert get_parameter_description("Ferritin") == (
            "Ferritin is a blood test parameter that provides information about your "
            "health. Abnormal levels may indicate health issues that should be "
            "discussed with your healthcare provider."
        )


class TestReferenceRangeClassify:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(69.9, Status.LOW), (70, Status.NORMAL), (100, Status.NORMAL), (100.1, Status.HIGH)],
    )
    def test_boundaries_are_inclusive(self, value: float, expected: Status) -> None:
        assert ReferenceRange(min=70, max=100).classify(value) is expected
