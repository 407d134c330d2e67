"""Selector discovery: probes ordered CSS candidates to find page controls."""

from __future__ import annotations

import logging

from playwright.async_api import Page

logger = logging.getLogger(__name__)


class SelectorDiscoveryResult:
    """Result of probing a candidate list."""

    def __init__(self, selector: str | None, attempts: list[dict]):
        self.selector = selector
        self.attempts = attempts  # [{selector, matches}]

    @property
    def found(self) -> bool:
        return self.selector is not None


async def discover_selector(page: Page, candidates: list[str]) -> SelectorDiscoveryResult:
    """Return the first candidate that matches at least one element.

    Candidates are tried in order; a candidate that raises (e.g. invalid
    syntax for the current engine) counts as zero matches.
    """
    attempts: list[dict] = []
    for selector in candidates:
        count = await _count_matches(page, selector)
        attempts.append({"selector": selector, "matches": count})
        if count > 0:
            logger.debug("Selector discovery: '%s' matched %d element(s) after %d probe(s)",
                         selector, count, len(attempts))
            return SelectorDiscoveryResult(selector, attempts)

    logger.debug("Selector discovery: none of %d candidates matched", len(candidates))
    return SelectorDiscoveryResult(None, attempts)


async def _count_matches(page: Page, selector: str) -> int:
    try:
        elements = await page.query_selector_all(selector)
    except Exception as e:
        logger.debug("Selector '%s' could not be evaluated: %s", selector, e)
        return 0
    return len(elements)
