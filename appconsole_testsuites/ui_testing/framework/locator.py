"""
================================================================================
Locator Templates
================================================================================

Parameterized element locators with typed placeholder substitution.

Features:
    - XPath (tree-path) and CSS (attribute/class) dialects
    - printf-style placeholders parsed once, at construction
    - Fail-closed substitution on arity or type mismatch

Placeholders:
    %s      string
    %d      integer
    %f      float (integers accepted), optional precision: %.2f
    %%      literal percent sign

Usage:
    >>> row = LocatorTemplate.xpath("//table//tr/td[text()='%s']")
    >>> row.resolve("John Doe")
    Query(kind=<QueryKind.XPATH: 'xpath'>, selector="//table//tr/td[text()='John Doe']")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple, Union


_PLACEHOLDER_RE = re.compile(r"%(?:\.(\d+))?(.)", re.DOTALL)


class LocatorFormatError(ValueError):
    """Raised when locator values do not match the template placeholders."""
    pass


class UnsupportedQueryKindError(ValueError):
    """Raised when a locator is built with a query kind the driver cannot run."""
    pass


class QueryKind(str, Enum):
    """Selector dialect understood by the driver."""

    XPATH = "xpath"
    CSS = "css"

    @classmethod
    def parse(cls, kind: Union[str, "QueryKind"]) -> "QueryKind":
        """Coerce a string/enum into a QueryKind."""
        if isinstance(kind, QueryKind):
            return kind
        try:
            return cls(str(kind).lower())
        except ValueError:
            raise UnsupportedQueryKindError(
                f"Unsupported locator type: {kind!r}"
            ) from None


@dataclass(frozen=True)
class Query:
    """
    A resolved, driver-ready selector.

    Attributes:
        kind: Selector dialect
        selector: Selector text with every placeholder substituted
    """
    kind: QueryKind
    selector: str

    def __str__(self) -> str:
        return f"{self.kind.value}={self.selector}"


@dataclass(frozen=True)
class Placeholder:
    """One conversion slot in a template."""
    conversion: str
    precision: Optional[int] = None

    def render(self, value: Any, position: int) -> str:
        """Render a single value, enforcing the slot's type."""
        # bool is an int subclass but never a valid locator value
        if isinstance(value, bool):
            raise LocatorFormatError(
                f"Argument {position} is a bool; expected {self.type_name}"
            )
        if self.conversion == "s":
            if not isinstance(value, str):
                raise LocatorFormatError(
                    f"Argument {position} for %s must be str, got {type(value).__name__}"
                )
            return value
        if self.conversion == "d":
            if not isinstance(value, int):
                raise LocatorFormatError(
                    f"Argument {position} for %d must be int, got {type(value).__name__}"
                )
            return str(value)
        if not isinstance(value, (int, float)):
            raise LocatorFormatError(
                f"Argument {position} for %f must be float, got {type(value).__name__}"
            )
        precision = 6 if self.precision is None else self.precision
        return f"{float(value):.{precision}f}"

    @property
    def type_name(self) -> str:
        return {"s": "str", "d": "int", "f": "float"}[self.conversion]


def _parse_pattern(pattern: str) -> Tuple[Tuple[str, ...], Tuple[Placeholder, ...]]:
    """
    Split a pattern into literal chunks and placeholders.

    The returned chunks always number ``len(placeholders) + 1``.
    """
    chunks: List[str] = []
    placeholders: List[Placeholder] = []
    current = ""
    pos = 0

    for match in _PLACEHOLDER_RE.finditer(pattern):
        current += pattern[pos:match.start()]
        pos = match.end()
        precision, conversion = match.group(1), match.group(2)

        if conversion == "%" and precision is None:
            current += "%"
            continue
        if conversion not in ("s", "d", "f"):
            raise LocatorFormatError(
                f"Unknown conversion '{match.group(0)}' in locator pattern: {pattern}"
            )
        if precision is not None and conversion != "f":
            raise LocatorFormatError(
                f"Precision is only valid for %f, got '{match.group(0)}' in: {pattern}"
            )

        chunks.append(current)
        current = ""
        placeholders.append(
            Placeholder(conversion, int(precision) if precision is not None else None)
        )

    tail = pattern[pos:]
    if "%" in tail:
        raise LocatorFormatError(f"Dangling '%' at end of locator pattern: {pattern}")

    chunks.append(current + tail)
    return tuple(chunks), tuple(placeholders)


@dataclass(frozen=True)
class LocatorTemplate:
    """
    Immutable locator with ordered, typed placeholders.

    Construct with the ``xpath`` / ``css`` factories; call ``resolve`` with
    one positional value per placeholder to get a ``Query``.
    """
    kind: QueryKind
    pattern: str
    _chunks: Tuple[str, ...] = field(init=False, repr=False, compare=False)
    _placeholders: Tuple[Placeholder, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", QueryKind.parse(self.kind))
        chunks, placeholders = _parse_pattern(self.pattern)
        object.__setattr__(self, "_chunks", chunks)
        object.__setattr__(self, "_placeholders", placeholders)

    @classmethod
    def xpath(cls, expression: str) -> "LocatorTemplate":
        """Create an XPath locator template."""
        return cls(QueryKind.XPATH, expression)

    @classmethod
    def css(cls, selector: str) -> "LocatorTemplate":
        """Create a CSS selector locator template."""
        return cls(QueryKind.CSS, selector)

    @property
    def arity(self) -> int:
        """Number of values ``resolve`` expects."""
        return len(self._placeholders)

    def resolve(self, *values: Any) -> Query:
        """
        Substitute placeholders left-to-right.

        Args:
            *values: One value per placeholder, in order

        Returns:
            Resolved Query

        Raises:
            LocatorFormatError: On arity or type mismatch
        """
        if len(values) != self.arity:
            raise LocatorFormatError(
                f"Locator expects {self.arity} value(s), got {len(values)}: {self.pattern}"
            )

        parts = [self._chunks[0]]
        for index, (slot, value) in enumerate(zip(self._placeholders, values)):
            parts.append(slot.render(value, index))
            parts.append(self._chunks[index + 1])

        return Query(self.kind, "".join(parts))


def resolve_locator(
    locator: Union[LocatorTemplate, Query],
    values: Tuple[Any, ...] = (),
) -> Query:
    """
    Resolve a template, or pass a pre-resolved Query through.

    Raises:
        LocatorFormatError: When values are given for an already-resolved Query
    """
    if isinstance(locator, Query):
        if values:
            raise LocatorFormatError(
                f"Query '{locator}' is already resolved; got {len(values)} extra value(s)"
            )
        return locator
    return locator.resolve(*values)


__all__ = [
    "LocatorFormatError",
    "UnsupportedQueryKindError",
    "QueryKind",
    "Query",
    "LocatorTemplate",
    "resolve_locator",
]
