# ================================================================================
# Wait Engine Module
# ================================================================================
#
# Explicit waits for element visibility, polled against the driver boundary.
#
# Key Features:
#   - Visible / AllVisible predicates over a resolved Query
#   - Fixed-interval polling with a hard timeout
#   - Explicit WaitResult instead of exception-driven soft-fails
#   - Fresh Waiter per call, so per-call timeouts never leak
#
# Usage:
#   engine = WaitEngine(driver, default_timeout=10)
#   spec = engine.spec(query, Predicate.VISIBLE)
#   element = engine.await_visible(spec, "Login Button")
#   shown = engine.check_visible(engine.spec(query, timeout=5), "Next Page")
#
# ================================================================================

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

from loguru import logger

from .driver import Driver
from .locator import Query


T = TypeVar("T")

DEFAULT_POLL_INTERVAL = 0.5


class WaitTimeoutError(TimeoutError):
    """Raised when a wait predicate is not satisfied within its timeout."""
    pass


class Predicate(str, Enum):
    """Visibility condition a wait is polling for."""

    VISIBLE = "visible"
    ALL_VISIBLE = "all_visible"


@dataclass(frozen=True)
class WaitSpec:
    """
    A single wait request.

    Attributes:
        query: Resolved element query
        predicate: Condition to satisfy
        timeout: Seconds to wait, strictly positive
    """
    query: Query
    predicate: Predicate = Predicate.VISIBLE
    timeout: float = 10.0

    def __post_init__(self) -> None:
        if not self.timeout > 0:
            raise ValueError(f"Wait timeout must be > 0, got {self.timeout}")


@dataclass(frozen=True)
class WaitResult(Generic[T]):
    """
    Outcome of a poll loop.

    Attributes:
        ok: True when the condition held before the timeout
        value: Condition value on success, None on timeout
        elapsed: Seconds spent polling
        attempts: Number of condition evaluations
    """
    ok: bool
    value: Optional[T] = None
    elapsed: float = 0.0
    attempts: int = 0

    def unwrap(self, description: str = "condition") -> T:
        """Return the value, or raise WaitTimeoutError if the wait timed out."""
        if not self.ok:
            raise WaitTimeoutError(
                f"Timed out after {self.elapsed:.1f}s ({self.attempts} attempts) "
                f"waiting for: {description}"
            )
        return self.value


class Waiter:
    """
    Fixed-interval poller with a hard deadline.

    The condition is evaluated at least once. Exceptions raised by the
    condition propagate immediately; only the deadline produces a timeout.
    """

    def __init__(
        self,
        timeout: float,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if not timeout > 0:
            raise ValueError(f"Wait timeout must be > 0, got {timeout}")
        self.timeout = timeout
        self.poll_interval = poll_interval
        self._clock = clock
        self._sleep = sleep

    def until(self, condition: Callable[[], Tuple[bool, T]]) -> WaitResult[T]:
        """
        Poll ``condition`` until it reports success or the deadline passes.

        Args:
            condition: Returns (satisfied, value)

        Returns:
            WaitResult describing the outcome
        """
        start = self._clock()
        deadline = start + self.timeout
        attempts = 0
        final_attempt = False

        while True:
            attempts += 1
            satisfied, value = condition()
            now = self._clock()
            if satisfied:
                return WaitResult(True, value, now - start, attempts)

            remaining = deadline - now
            if final_attempt or remaining <= 0:
                return WaitResult(False, None, now - start, attempts)
            if remaining <= self.poll_interval:
                # Last poll lands on the deadline
                final_attempt = True
                self._sleep(remaining)
            else:
                self._sleep(self.poll_interval)


class WaitEngine:
    """
    Visibility waits over a driver.

    The engine is stateless between calls: its default timeout and poll
    interval are fixed at construction, and every call polls through its
    own Waiter.

    Example:
        engine = WaitEngine(driver, default_timeout=10)
        row = engine.await_visible(engine.spec(query), "Table Row")
    """

    def __init__(
        self,
        driver: Driver,
        default_timeout: float = 10.0,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            driver: Driver used to query elements
            default_timeout: Timeout in seconds when a call does not override it
            poll_interval: Seconds between polls
            clock: Monotonic time source
            sleep: Blocking sleep function
        """
        if not default_timeout > 0:
            raise ValueError(f"Default timeout must be > 0, got {default_timeout}")
        self.driver = driver
        self._default_timeout = default_timeout
        self._poll_interval = poll_interval
        self._clock = clock
        self._sleep = sleep

    @property
    def default_timeout(self) -> float:
        return self._default_timeout

    @property
    def poll_interval(self) -> float:
        return self._poll_interval

    def spec(
        self,
        query: Query,
        predicate: Predicate = Predicate.VISIBLE,
        timeout: Optional[float] = None,
    ) -> WaitSpec:
        """Build a WaitSpec, falling back to the engine's default timeout."""
        return WaitSpec(
            query=query,
            predicate=predicate,
            timeout=self._default_timeout if timeout is None else timeout,
        )

    def waiter(self, timeout: float) -> Waiter:
        """Create an independent Waiter for one call."""
        return Waiter(timeout, self._poll_interval, self._clock, self._sleep)

    def poll(self, spec: WaitSpec) -> WaitResult[Any]:
        """
        Poll until the WaitSpec predicate holds or its timeout elapses.

        Returns:
            WaitResult holding one handle (VISIBLE) or a list of handles
            (ALL_VISIBLE) on success
        """
        if spec.predicate is Predicate.ALL_VISIBLE:
            condition = lambda: self._all_visible(spec.query)
        else:
            condition = lambda: self._first_visible(spec.query)
        return self.waiter(spec.timeout).until(condition)

    def await_visible(self, spec: WaitSpec, element_name: str) -> Any:
        """
        Block until the element(s) are visible.

        Returns:
            Element handle, or list of handles for ALL_VISIBLE

        Raises:
            WaitTimeoutError: When the predicate does not hold in time
        """
        logger.info(
            f"Waiting for Element to be {spec.predicate.value} '{element_name}' "
            f"[{spec.query}] (timeout={spec.timeout}s)"
        )
        result = self.poll(spec)
        return result.unwrap(f"'{element_name}' {spec.predicate.value} [{spec.query}]")

    def check_visible(self, spec: WaitSpec, element_name: str) -> bool:
        """Return whether the element(s) became visible within the timeout."""
        logger.info(f"Checking if Element is {spec.predicate.value} '{element_name}'")
        result = self.poll(spec)
        if result.ok:
            logger.info(f"Element '{element_name}' is {spec.predicate.value}")
        else:
            logger.info(
                f"Element '{element_name}' is not {spec.predicate.value} "
                f"after {result.elapsed:.1f}s"
            )
        return result.ok

    def _first_visible(self, query: Query) -> Tuple[bool, Any]:
        elements = self.driver.find_elements(query)
        if not elements:
            return False, None
        first = elements[0]
        return self.driver.is_displayed(first), first

    def _all_visible(self, query: Query) -> Tuple[bool, List[Any]]:
        elements = self.driver.find_elements(query)
        if not elements:
            return False, []
        return all(self.driver.is_displayed(e) for e in elements), list(elements)


__all__ = [
    "WaitTimeoutError",
    "Predicate",
    "WaitSpec",
    "WaitResult",
    "Waiter",
    "WaitEngine",
    "DEFAULT_POLL_INTERVAL",
]
