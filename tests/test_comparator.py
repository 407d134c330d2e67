"""Tests for polarity-aware comparison and status derivation."""

import pytest

from translit_qa.executor.comparator import compare, status_for
from translit_qa.executor.normalizer import normalize
from translit_qa.models.test_case import Polarity
from translit_qa.models.test_result import CaseStatus

ZWSP = "\N{ZERO WIDTH SPACE}"

PAIRS = [
    ("මම ගෙදර යනවා.", "මම ගෙදර යනවා"),
    ("මම  ගෙදර යනවා", "මම ගෙදර යනවා"),
    (f"මම{ZWSP} ගෙදර", "මම ගෙදර"),
    ("  hari hari ", "hari hari"),
    ("LOL", "LOL"),
    ("LOL", "lol"),
    ("ඇයි, මේක දියන්", "ඇයි, මේක දියන්."),
    ("thnx බං!", "thanks බං!"),
]


class TestPositiveComparison:

    def test_exact_match_passes(self):
        assert compare("අපි යමු.", "අපි යමු.", Polarity.POSITIVE) is True

    def test_ignores_whitespace_and_trailing_period(self):
        assert compare("අපි   යමු", "අපි යමු.", Polarity.POSITIVE) is True

    def test_ignores_zero_width_marks(self):
        assert compare(f"අපි{ZWSP} යමු", "අපි යමු", Polarity.POSITIVE) is True

    def test_different_text_fails(self):
        assert compare("අපි යමු", "අපි එන්නම්", Polarity.POSITIVE) is False

    @pytest.mark.parametrize("actual,expected", PAIRS)
    def test_matches_normalized_equality(self, actual, expected):
        assert compare(actual, expected, Polarity.POSITIVE) == (normalize(actual) == normalize(expected))


class TestNegativeComparison:

    def test_exact_match_fails(self):
        assert compare("මම ගෙදර යනවා.", "මම ගෙදර යනවා.", Polarity.NEGATIVE) is False

    def test_surrounding_whitespace_still_counts_as_match(self):
        assert compare("  මම ගෙදර යනවා. ", "මම ගෙදර යනවා.", Polarity.NEGATIVE) is False

    def test_inner_whitespace_difference_passes(self):
        """Negative checks are unnormalized: a doubled space is a deviation."""
        assert compare("මම  ගෙදර යනවා.", "මම ගෙදර යනවා.", Polarity.NEGATIVE) is True

    def test_trailing_period_difference_passes(self):
        assert compare("මම ගෙදර යනවා", "මම ගෙදර යනවා.", Polarity.NEGATIVE) is True

    @pytest.mark.parametrize("actual,expected", PAIRS)
    def test_matches_trimmed_inequality(self, actual, expected):
        assert compare(actual, expected, Polarity.NEGATIVE) == (actual.strip() != expected.strip())


class TestMissingValues:

    @pytest.mark.parametrize("polarity", list(Polarity))
    @pytest.mark.parametrize("actual,expected", [
        ("", "මම"),
        ("මම", ""),
        (None, "මම"),
        ("මම", None),
        ("", ""),
    ])
    def test_empty_side_never_passes(self, actual, expected, polarity):
        assert compare(actual, expected, polarity) is False


class TestStatusFor:

    def test_positive_scenario_exact_output_passes(self, positive_case):
        assert status_for(positive_case, positive_case.expected_output) is CaseStatus.PASS

    def test_positive_mismatch_fails(self, positive_case):
        assert status_for(positive_case, "මම ගෙදර යනවා") is CaseStatus.FAIL

    def test_negative_scenario_too_perfect_fails(self, negative_case):
        assert status_for(negative_case, "මම ගෙදර යනවා.") is CaseStatus.FAIL

    def test_negative_scenario_deviation_passes(self, negative_case):
        assert status_for(negative_case, "මමගෙදරයනවා") is CaseStatus.PASS

    def test_empty_output_fails_for_negative(self, negative_case):
        assert status_for(negative_case, "") is CaseStatus.FAIL
