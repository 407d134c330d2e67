"""Comparator: decides whether an observed output satisfies a case."""

from __future__ import annotations

import logging

from translit_qa.models.test_case import Polarity, TranslationCase
from translit_qa.models.test_result import CaseStatus

from .normalizer import normalize

logger = logging.getLogger(__name__)


def compare(actual: str | None, expected: str | None, polarity: Polarity) -> bool:
    """Return True when the case passes.

    Positive cases pass when both strings normalize to the same text.
    Negative cases pass when the trimmed raw strings differ (no
    normalization, so an inner whitespace change counts as a deviation).
    A missing or empty side never passes.
    """
    if not actual or not expected:
        return False

    match polarity:
        case Polarity.POSITIVE:
            return normalize(actual) == normalize(expected)
        case Polarity.NEGATIVE:
            return actual.strip() != expected.strip()
        case _:
            raise ValueError(f"Unknown polarity: {polarity!r}")


def status_for(case: TranslationCase, actual: str | None) -> CaseStatus:
    """Map the comparison outcome for ``case`` to a recorded status."""
    passed = compare(actual, case.expected_output, case.polarity)
    logger.debug("Compare %s (%s): actual=%r expected=%r -> %s",
                 case.case_id, case.polarity.value, actual, case.expected_output,
                 "pass" if passed else "fail")
    return CaseStatus.PASS if passed else CaseStatus.FAIL
