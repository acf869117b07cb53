"""
================================================================================
Driver Boundary
================================================================================

The small surface the wait engine and element actions need from a browser
automation driver, plus its Playwright (sync API) implementation.

The wait engine owns polling, so the driver only answers point-in-time
questions: which elements match right now, and is this one displayed.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from playwright.sync_api import ElementHandle, Page

from .locator import Query, QueryKind, UnsupportedQueryKindError


class Driver(Protocol):
    """Operations the framework consumes from the underlying driver."""

    def find_elements(self, query: Query) -> List[Any]:
        ...

    def is_displayed(self, handle: Any) -> bool:
        ...

    def get_attribute(self, handle: Any, name: str) -> Optional[str]:
        ...

    def get_text(self, handle: Any) -> str:
        ...

    def click(self, handle: Any) -> None:
        ...

    def send_keys(self, handle: Any, text: str) -> None:
        ...

    def scroll_into_view(self, handle: Any) -> None:
        ...

    def move_to(self, handle: Any) -> None:
        ...


class PlaywrightDriver:
    """
    Driver backed by a synchronous Playwright Page.

    Element handles are Playwright ``ElementHandle`` objects, so a handle
    keeps pointing at the same DOM node while a virtualized table re-renders
    around it.

    Usage:
        >>> with BrowserManager(settings) as manager:
        ...     driver = PlaywrightDriver(manager.new_page())
    """

    SELECTOR_ENGINES: Dict[QueryKind, str] = {
        QueryKind.XPATH: "xpath",
        QueryKind.CSS: "css",
    }

    def __init__(self, page: Page):
        """
        Args:
            page: Playwright Page (sync API)
        """
        self.page = page

    def to_selector(self, query: Query) -> str:
        """Render a Query with its Playwright selector engine prefix."""
        engine = self.SELECTOR_ENGINES.get(query.kind)
        if engine is None:
            raise UnsupportedQueryKindError(
                f"Unsupported locator type: {query.kind!r}"
            )
        return f"{engine}={query.selector}"

    def find_elements(self, query: Query) -> List[ElementHandle]:
        return self.page.query_selector_all(self.to_selector(query))

    def is_displayed(self, handle: ElementHandle) -> bool:
        return handle.is_visible()

    def get_attribute(self, handle: ElementHandle, name: str) -> Optional[str]:
        return handle.get_attribute(name)

    def get_text(self, handle: ElementHandle) -> str:
        return handle.inner_text()

    def click(self, handle: ElementHandle) -> None:
        handle.click()

    def send_keys(self, handle: ElementHandle, text: str) -> None:
        # Keystrokes append to existing content
        handle.type(text)

    def scroll_into_view(self, handle: ElementHandle) -> None:
        handle.scroll_into_view_if_needed()

    def move_to(self, handle: ElementHandle) -> None:
        handle.hover()

    def screenshot(self, full_page: bool = True) -> bytes:
        """Capture the current page as PNG bytes."""
        return self.page.screenshot(full_page=full_page)

    @property
    def current_url(self) -> str:
        return self.page.url


__all__ = [
    "Driver",
    "PlaywrightDriver",
]
