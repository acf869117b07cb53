"""
================================================================================
Base Page Object
================================================================================

Foundation class for the Page Object Model implementation.

Provides:
    - Element actions wired to an injected driver and settings
    - Shared logger binding per page

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from .config_loader import UiSettings
from .driver import Driver
from .element_actions import ElementActions
from .wait_engine import WaitEngine


class BasePage:
    """
    Base class for all page objects.

    Locators are declared as class-level ``LocatorTemplate`` constants and
    interactions go through ``self.actions``.

    Usage:
        class LoginPage(BasePage):
            SIGN_IN_BUTTON = LocatorTemplate.xpath("//*[text()='Sign in']")

            def sign_in(self) -> None:
                self.actions.click(self.SIGN_IN_BUTTON, "Sign In Button")
    """

    def __init__(
        self,
        driver: Driver,
        settings: Optional[UiSettings] = None,
        engine: Optional[WaitEngine] = None,
    ):
        """
        Initialize page object.

        Args:
            driver: Driver for the current browser session
            settings: UI settings; defaults are used when omitted
            engine: Pre-built WaitEngine (shares the driver); built from
                    settings when omitted
        """
        self.driver = driver
        self.settings = settings or UiSettings()
        if engine is None:
            engine = WaitEngine(
                driver,
                default_timeout=self.settings.timeout_seconds,
                poll_interval=self.settings.poll_interval,
            )
        elif engine.driver is not driver:
            raise ValueError("WaitEngine must wrap the same driver as the page")
        self.engine = engine
        self.actions = ElementActions(engine)
        self.log = logger.bind(page=type(self).__name__)


__all__ = [
    "BasePage",
]
