"""Playwright adapter: use a Playwright locator as a declared part.

Usage:
    from playwright.sync_api import Page

    class DashboardView(AbstractView):
        title: Annotated[Composite, Require]

        def __init__(self, page: Page) -> None:
            super().__init__(page)
            self.title = PlaywrightElement(page.locator("#dashboard-title"))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from viewkit.core.capabilities import Composite

if TYPE_CHECKING:
    from playwright.sync_api import Locator

log = structlog.get_logger(__name__)


class PlaywrightElement(Composite):
    """A Composite backed by a Playwright sync ``Locator``.

    Presence and visibility are read once per call with no waiting; waits
    belong to the test (``expect(...)``), not to the loaded check.
    """

    def __init__(self, locator: Locator) -> None:
        self.locator = locator

    def is_present(self) -> bool:
        return self.locator.count() > 0

    def is_displayed(self) -> bool:
        visible = self.locator.is_visible()
        log.debug("playwright_element_checked", visible=visible)
        return visible
