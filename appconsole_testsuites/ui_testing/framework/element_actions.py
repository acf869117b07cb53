# ================================================================================
# Element Actions Module
# ================================================================================
#
# This module provides the named UI element interactions page objects use.
# Every action resolves its locator, waits through the WaitEngine, then acts.
#
# Key Features:
#   - Templated locators with positional values
#   - Explicit visibility waits before every interaction
#   - Credential masking in logs and Allure step titles
#   - Soft-fail enumeration for polling-style callers
#
# ================================================================================

from typing import Any, List, Optional, Union

import allure
from loguru import logger

from .locator import LocatorTemplate, Query, resolve_locator
from .wait_engine import Predicate, WaitEngine


LocatorLike = Union[LocatorTemplate, Query]

MASK = "******"
SENSITIVE_NAME_MARKERS = ("password",)


def is_sensitive(element_name: str) -> bool:
    """Whether values typed into this element must be masked in logs."""
    lowered = element_name.lower()
    return any(marker in lowered for marker in SENSITIVE_NAME_MARKERS)


def mask_value(element_name: str, value: str) -> str:
    """Return the loggable form of a value typed into ``element_name``."""
    return MASK if is_sensitive(element_name) else value


def _describe(element_name: str, values: tuple) -> str:
    if not values:
        return f"'{element_name}'"
    return f"'{element_name}' with replace values {list(values)}"


class ElementActions:
    """
    Element interactions built on the wait engine.

    Each method takes a locator (a ``LocatorTemplate`` or a resolved
    ``Query``), a human-readable element name used in logs and reports,
    and the positional values for the template's placeholders.

    Example:
        actions = ElementActions(WaitEngine(driver, default_timeout=10))
        actions.click(SIGN_IN_BUTTON, "Sign In Button")
        actions.send_keys(PASSWORD_INPUT, "Password Field", "secret")
        actions.click(CARD_TITLE, "Card Title", "Managed Applications")
    """

    def __init__(self, engine: WaitEngine):
        """
        Initialize ElementActions.

        Args:
            engine: WaitEngine that owns the driver and default timeout
        """
        self.engine = engine
        self.driver = engine.driver

    # =========================================================================
    # Waits
    # =========================================================================

    def wait_for_visible(
        self,
        locator: LocatorLike,
        element_name: str,
        *values: Any,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Wait for an element to become visible.

        Raises:
            WaitTimeoutError: If not visible within the timeout
        """
        query = resolve_locator(locator, values)
        self.engine.await_visible(
            self.engine.spec(query, Predicate.VISIBLE, timeout), element_name
        )

    def get_element(
        self,
        locator: LocatorLike,
        element_name: str,
        *values: Any,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Get the first matching element once it is visible.

        Returns:
            Driver element handle

        Raises:
            WaitTimeoutError: If not visible within the timeout
        """
        query = resolve_locator(locator, values)
        return self.engine.await_visible(
            self.engine.spec(query, Predicate.VISIBLE, timeout), element_name
        )

    def is_visible(
        self,
        locator: LocatorLike,
        element_name: str,
        *values: Any,
        timeout: Optional[float] = None,
    ) -> bool:
        """
        Check whether an element becomes visible.

        Only a timeout is converted into False; driver errors propagate.

        Args:
            timeout: Seconds to wait; the engine default when omitted
        """
        query = resolve_locator(locator, values)
        return self.engine.check_visible(
            self.engine.spec(query, Predicate.VISIBLE, timeout), element_name
        )

    # =========================================================================
    # Interactions
    # =========================================================================

    @allure.step("Click element: {element_name}")
    def click(self, locator: LocatorLike, element_name: str, *values: Any) -> None:
        """Click an element once it is visible."""
        logger.info(f"Clicking on Element {_describe(element_name, values)}")
        element = self.get_element(locator, element_name, *values)
        self.driver.click(element)

    def send_keys(
        self,
        locator: LocatorLike,
        element_name: str,
        keys_to_send: str,
        *values: Any,
    ) -> None:
        """
        Type into an element once it is visible.

        The logged value is masked for password fields; the keystrokes
        sent to the element are not.
        """
        logged = mask_value(element_name, keys_to_send)
        # Context-manager step: a decorated step would record keys_to_send as a parameter
        with allure.step(f"Send keys '{logged}' to: {element_name}"):
            logger.info(f"Send Keys '{logged}' to Element {_describe(element_name, values)}")
            element = self.get_element(locator, element_name, *values)
            self.driver.send_keys(element, keys_to_send)

    @allure.step("Get text: {element_name}")
    def get_text(self, locator: LocatorLike, element_name: str, *values: Any) -> str:
        """
        Get visible text of an element.

        Returns:
            Rendered text of the element
        """
        logger.info(f"Getting text from Element {_describe(element_name, values)}")
        element = self.get_element(locator, element_name, *values)
        return self.driver.get_text(element)

    @allure.step("Get attribute: {attribute} from {element_name}")
    def get_attribute(
        self,
        locator: LocatorLike,
        element_name: str,
        attribute: str,
        *values: Any,
    ) -> Optional[str]:
        """Get an attribute of a visible element, or None if absent."""
        logger.info(
            f"Getting attribute '{attribute}' from Element {_describe(element_name, values)}"
        )
        element = self.get_element(locator, element_name, *values)
        return self.driver.get_attribute(element, attribute)

    def get_all(
        self,
        locator: LocatorLike,
        element_name: str,
        timeout: float,
        *values: Any,
    ) -> List[Any]:
        """
        Get all matching elements once every one of them is visible.

        Returns an empty list when the wait times out, so callers can treat
        "nothing rendered" as a normal outcome.

        Args:
            locator: Locator of the elements
            element_name: Human-readable name for logging
            timeout: Seconds to wait (the engine default is not used)
            *values: Placeholder values
        """
        query = resolve_locator(locator, values)
        logger.info(f"Getting Number of Elements {_describe(element_name, values)}")
        result = self.engine.poll(
            self.engine.spec(query, Predicate.ALL_VISIBLE, timeout)
        )
        if not result.ok:
            logger.debug(f"No visible elements for '{element_name}' after {timeout}s")
            return []
        return result.value

    @allure.step("Move to element: {element_name}")
    def move_to(self, locator: LocatorLike, element_name: str, *values: Any) -> None:
        """Move the mouse over an element."""
        logger.info(f"[Actions] Moving on Element {_describe(element_name, values)}")
        element = self.get_element(locator, element_name, *values)
        self.driver.move_to(element)

    def scroll_into_view(self, target: Any, element_name: str, *values: Any) -> None:
        """
        Scroll an element into the viewport.

        Args:
            target: An element handle, or a locator to resolve and wait for
            element_name: Human-readable name for logging
            *values: Placeholder values when ``target`` is a locator
        """
        logger.info(f"Scrolling into Element {_describe(element_name, values)}")
        if isinstance(target, (LocatorTemplate, Query)):
            target = self.get_element(target, element_name, *values)
        self.driver.scroll_into_view(target)


__all__ = [
    "ElementActions",
    "LocatorLike",
    "MASK",
    "is_sensitive",
    "mask_value",
]
