"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

from translit_qa.fixtures.catalog import write_fixture_workbook
from translit_qa.models.config import HarnessConfig, TimingConfig
from translit_qa.models.test_case import TranslationCase
from translit_qa.models.test_result import CaseResult, CaseStatus, RunSummary


# ============================================================================
# Case Fixtures
# ============================================================================


@pytest.fixture
def positive_case() -> TranslationCase:
    return TranslationCase(
        case_id="Pos_Fun_0001",
        name="Entrance of attendance in a Sri Lankan",
        length_class="M",
        input_text="mama gedhara yanawa, habayi vahi na nisa dhenma yanne naha",
        expected_output="මම ගෙදර යනවා, හැබැයි වහින නිසා දැන්ම යන්නේ නෑ",
        justification="Two clauses correctly joined.",
        coverage="Compound sentence",
    )


@pytest.fixture
def negative_case() -> TranslationCase:
    return TranslationCase(
        case_id="Neg_Fun_0001",
        name="Joined words no spaces",
        length_class="S",
        input_text="mamagedharayanawa",
        expected_output="මම ගෙදර යනවා.",
        justification="Incorrect segmentation or partial fail.",
        coverage="Joined words",
    )


@pytest.fixture
def ui_case() -> TranslationCase:
    return TranslationCase(
        case_id="Pos_UI_0001",
        name="Real-time output update",
        length_class="S",
        input_text="mama",
        expected_output="මම",
    )


@pytest.fixture
def sample_cases(positive_case, negative_case, ui_case) -> list[TranslationCase]:
    return [positive_case, negative_case, ui_case]


# ============================================================================
# Workbook / Config Fixtures
# ============================================================================


@pytest.fixture
def fixture_workbook(tmp_path: Path, sample_cases) -> Path:
    """A fixture workbook holding the three sample cases."""
    return write_fixture_workbook(tmp_path / "test-data" / "test-cases.xlsx", sample_cases)


@pytest.fixture
def harness_config(tmp_path: Path, fixture_workbook: Path) -> HarnessConfig:
    """Config with every path inside tmp_path and near-zero delays."""
    return HarnessConfig(
        fixture_path=str(fixture_workbook),
        results_dir=str(tmp_path / "results"),
        screenshots_dir=str(tmp_path / "test-reports" / "screenshots"),
        videos_dir=str(tmp_path / "test-reports" / "videos"),
        timing=TimingConfig(
            clear_pause_ms=0,
            first_settle_ms=0,
            settle_ms=0,
            read_attempts=3,
            read_interval_ms=0,
            poll_interval_ms=0,
            output_timeout_ms=200,
            keystroke_pause_ms=0,
            case_timeout_seconds=5,
        ),
    )


# ============================================================================
# Result Fixtures
# ============================================================================


def make_result(case: TranslationCase, status: CaseStatus, actual: str = "", **kwargs) -> CaseResult:
    return CaseResult(case=case, actual_output=actual, status=status,
                      execution_time_ms=kwargs.pop("execution_time_ms", 1200), **kwargs)


@pytest.fixture
def result_factory():
    """Fixture that provides the make_result function."""
    return make_result


@pytest.fixture
def sample_results(positive_case, negative_case, ui_case) -> list[CaseResult]:
    return [
        make_result(positive_case, CaseStatus.PASS, positive_case.expected_output),
        make_result(negative_case, CaseStatus.FAIL, negative_case.expected_output,
                    screenshot_path="test-reports/screenshots/Neg_Fun_0001.png"),
        make_result(ui_case, CaseStatus.ERROR, error_message="Timeout 30000ms exceeded"),
    ]


@pytest.fixture
def sample_summary() -> RunSummary:
    start = datetime(2026, 1, 1, 10, 0, 0)
    return RunSummary(total=3, passed=1, failed=1, errors=1,
                      start_time=start, end_time=start + timedelta(seconds=42.5))


# ============================================================================
# Playwright Mocks
# ============================================================================


def make_mock_page(present: set[str] | None = None, outputs: list[str] | None = None):
    """AsyncMock page where ``present`` selectors match one element each and
    successive ``text_content`` calls return ``outputs`` (last value repeats)."""
    present = present if present is not None else {"textarea", "div.w-full.h-80.bg-slate-50.whitespace-pre-wrap"}
    page = AsyncMock()
    page.on = Mock()

    async def query_selector_all(selector):
        return [Mock()] if selector in present else []

    page.query_selector_all = AsyncMock(side_effect=query_selector_all)
    page.query_selector = AsyncMock(return_value=None)

    remaining = list(outputs or [""])

    async def text_content(selector):
        if len(remaining) > 1:
            return remaining.pop(0)
        return remaining[0]

    page.text_content = AsyncMock(side_effect=text_content)
    return page


@pytest.fixture
def mock_page_factory():
    """Fixture that provides the make_mock_page function."""
    return make_mock_page
