"""Configuration models for the translation test harness."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

DEFAULT_TARGET_URL = "https://www.swifttranslator.com/"


class ViewportConfig(BaseModel):
    width: int = 1280
    height: int = 720


class SelectorConfig(BaseModel):
    """Ordered CSS selector candidates probed to find the page controls."""

    input_candidates: list[str] = Field(
        default_factory=lambda: [
            "textarea",
            'input[type="text"]',
            'input[name*="text"]',
            'input[name*="input"]',
            '[contenteditable="true"]',
            ".input-field",
            "#input",
            "#text",
            '[aria-label*="input"]',
            '[placeholder*="Type"]',
        ]
    )
    output_candidates: list[str] = Field(
        default_factory=lambda: [
            "div.w-full.h-80.bg-slate-50.whitespace-pre-wrap",
            'div[class*="output"]',
            'div[class*="result"]',
            'div[id*="output"]',
            'div[id*="result"]',
            ".output-field",
            "#output",
            "#result",
            '[aria-label*="output"]',
            '[class*="translat"]',
        ]
    )
    ready_selector: str = 'textarea, input[type="text"]'
    # e.g. 'button:has-text("Clear")'; None empties the input directly
    clear_button: Optional[str] = None

    @field_validator("input_candidates", "output_candidates")
    @classmethod
    def non_empty(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("At least one selector candidate is required")
        return v


class TimingConfig(BaseModel):
    """Delays and timeouts, all in milliseconds unless noted."""

    wait_strategy: Literal["fixed", "poll"] = "fixed"
    clear_pause_ms: int = 500
    first_settle_ms: int = 3000
    settle_ms: int = 2000
    read_attempts: int = 5
    read_interval_ms: int = 1000
    poll_interval_ms: int = 250
    output_timeout_ms: int = 10000
    keystroke_pause_ms: int = 500
    navigation_timeout_ms: int = 30000
    ready_timeout_ms: int = 10000
    case_timeout_seconds: float = 60.0


class HarnessConfig(BaseModel):
    # Target
    target_url: str = DEFAULT_TARGET_URL

    # Browser
    headless: bool = True
    slow_mo_ms: int = 100
    viewport: ViewportConfig = Field(default_factory=ViewportConfig)
    record_video: bool = False

    selectors: SelectorConfig = Field(default_factory=SelectorConfig)
    timing: TimingConfig = Field(default_factory=TimingConfig)

    # Fixtures
    fixture_path: str = "test-data/test-cases.xlsx"
    fixture_sheet: str = "Test cases"

    # Output locations
    results_dir: str = "results"
    results_workbook: str = "test-results.xlsx"
    html_report: str = "execution-report.html"
    text_summary: str = "execution-summary.txt"
    screenshots_dir: str = "test-reports/screenshots"
    videos_dir: str = "test-reports/videos"
    screenshot_on_failure: bool = True

    user_agent: Optional[str] = None

    @property
    def results_workbook_path(self) -> Path:
        return Path(self.results_dir) / self.results_workbook

    @property
    def html_report_path(self) -> Path:
        return Path(self.results_dir) / self.html_report

    @property
    def text_summary_path(self) -> Path:
        return Path(self.results_dir) / self.text_summary

    @classmethod
    def load(cls, path: str | Path) -> "HarnessConfig":
        """Load config from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = json.load(f)
        return cls(**data)

    @classmethod
    def load_or_default(cls, path: str | Path) -> "HarnessConfig":
        """Load config from ``path`` when it exists, otherwise use built-in defaults."""
        if Path(path).exists():
            return cls.load(path)
        return cls()

    def save(self, path: str | Path) -> None:
        """Save config to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)
