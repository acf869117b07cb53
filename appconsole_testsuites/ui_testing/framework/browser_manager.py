"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation (Playwright sync API).

Features:
    - Local launch of chromium / firefox / webkit
    - Remote browser server connection when a grid URL is configured
    - Context isolation per test
    - Settings injected explicitly, no module-level state

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    BrowserType,
    Page,
    Playwright,
    sync_playwright,
)

from .config_loader import UiSettings


SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")

# Aliases accepted for browser names used by other tooling
BROWSER_ALIASES: Dict[str, str] = {
    "chrome": "chromium",
    "edge": "chromium",
}


def normalize_browser_name(name: str) -> str:
    """
    Map a configured browser name onto a Playwright browser type.

    Raises:
        ValueError: For browsers Playwright does not provide
    """
    key = name.strip().lower()
    key = BROWSER_ALIASES.get(key, key)
    if key not in SUPPORTED_BROWSERS:
        raise ValueError(
            f"Invalid browser: {name!r}. Expected one of {', '.join(SUPPORTED_BROWSERS)}"
        )
    return key


class BrowserManager:
    """
    Manages the browser instance and contexts for one test session.

    Usage:
        with BrowserManager(settings) as manager:
            page = manager.new_page()
            page.goto(settings.base_url)
    """

    # Default browser launch options
    DEFAULT_LAUNCH_ARGS: List[str] = [
        "--disable-gpu",
        "--no-sandbox",
        "--disable-dev-shm-usage",
    ]

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(self, settings: UiSettings):
        """
        Initialize browser manager.

        Args:
            settings: UI settings (browser, headless, grid_url)
        """
        self.settings = settings
        self.browser_type = normalize_browser_name(settings.browser)

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    def __enter__(self) -> "BrowserManager":
        """Context manager entry - start browser."""
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - close browser."""
        self.close()

    def start(self) -> Browser:
        """Start Playwright and launch (or connect to) the browser."""
        self._playwright = sync_playwright().start()
        launcher: BrowserType = getattr(self._playwright, self.browser_type)

        logger.info(
            f"Set up browser {self.browser_type} with headless {self.settings.headless}, "
            f"grid URL: {self.settings.grid_url or '-'}"
        )

        if self.settings.grid_url:
            self._browser = launcher.connect(self.settings.grid_url)
            logger.info(f"Connected to remote browser at: {self.settings.grid_url}")
        else:
            args = self.DEFAULT_LAUNCH_ARGS if self.browser_type == "chromium" else []
            self._browser = launcher.launch(headless=self.settings.headless, args=args)
            logger.info("Using local browser")

        return self._browser

    def close(self) -> None:
        """Close all contexts, the browser and Playwright."""
        for context in self._contexts:
            context.close()
        self._contexts.clear()

        if self._browser:
            self._browser.close()
            self._browser = None

        if self._playwright:
            self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new isolated browser context.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = self._browser.new_context(**{**self.DEFAULT_CONTEXT_OPTIONS, **options})
        self._contexts.append(context)
        return context

    def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """
        Create new page in new or existing context.

        Args:
            context: Existing context to use (creates new if None)
            **context_options: Options for new context
        """
        if context is None:
            context = self.new_context(**context_options)
        return context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
    "normalize_browser_name",
]
