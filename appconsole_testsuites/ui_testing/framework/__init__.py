"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the App Console.

Components:
    - locator: Parameterized XPath/CSS locator templates
    - wait_engine: Explicit visibility waits with timeout results
    - element_actions: Named element interactions with masked logging
    - driver: Driver boundary and its Playwright implementation
    - page_base: Base page object
    - browser_manager: Browser lifecycle management
    - config_loader: YAML/env configuration and UI settings

Author: Automation Team
License: MIT
================================================================================
"""

from .locator import (
    LocatorFormatError,
    LocatorTemplate,
    Query,
    QueryKind,
    UnsupportedQueryKindError,
)
from .wait_engine import (
    Predicate,
    WaitEngine,
    WaitResult,
    WaitSpec,
    WaitTimeoutError,
    Waiter,
)
from .element_actions import ElementActions
from .driver import Driver, PlaywrightDriver
from .page_base import BasePage
from .browser_manager import BrowserManager
from .config_loader import ConfigLoader, ConfigurationError, UiSettings

__all__ = [
    "LocatorFormatError",
    "LocatorTemplate",
    "Query",
    "QueryKind",
    "UnsupportedQueryKindError",
    "Predicate",
    "WaitEngine",
    "WaitResult",
    "WaitSpec",
    "WaitTimeoutError",
    "Waiter",
    "ElementActions",
    "Driver",
    "PlaywrightDriver",
    "BasePage",
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "UiSettings",
]
