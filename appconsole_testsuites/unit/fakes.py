"""
Fakes shared by the unit tests: a manual clock, in-memory elements and a
driver that answers queries from a selector table. Nothing here touches a
browser.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from appconsole_testsuites.ui_testing.framework.locator import Query


class FakeClock:
    """Monotonic clock that only moves when ``sleep`` is called."""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps: List[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@dataclass(eq=False)
class FakeElement:
    """In-memory element handle."""
    text: str = ""
    attributes: Dict[str, str] = field(default_factory=dict)
    visible: bool = True
    visible_at: float = 0.0
    typed: List[str] = field(default_factory=list)


ElementSource = Union[List[FakeElement], Callable[[], List[FakeElement]]]


class FakeDriver:
    """
    Driver that resolves queries through a ``{str(query): elements}`` table.

    Values may be lists or callables returning lists. Every interaction is
    recorded in ``calls`` as ``(operation, element)`` tuples.
    """

    def __init__(self, clock: Optional[FakeClock] = None):
        self.clock = clock or FakeClock()
        self.elements: Dict[str, ElementSource] = {}
        self.queries: List[Query] = []
        self.calls: List[tuple] = []
        self.errors: Dict[str, Exception] = {}

    def register(self, query: Query, source: ElementSource) -> None:
        self.elements[str(query)] = source

    def fail_on(self, query: Query, error: Exception) -> None:
        self.errors[str(query)] = error

    def find_elements(self, query: Query) -> List[Any]:
        self.queries.append(query)
        key = str(query)
        if key in self.errors:
            raise self.errors[key]
        source = self.elements.get(key, [])
        return list(source() if callable(source) else source)

    def is_displayed(self, handle: FakeElement) -> bool:
        return handle.visible and self.clock.now >= handle.visible_at

    def get_attribute(self, handle: FakeElement, name: str) -> Optional[str]:
        return handle.attributes.get(name)

    def get_text(self, handle: FakeElement) -> str:
        return handle.text

    def click(self, handle: FakeElement) -> None:
        self.calls.append(("click", handle))

    def send_keys(self, handle: FakeElement, text: str) -> None:
        handle.typed.append(text)
        self.calls.append(("send_keys", handle))

    def scroll_into_view(self, handle: FakeElement) -> None:
        self.calls.append(("scroll_into_view", handle))

    def move_to(self, handle: FakeElement) -> None:
        self.calls.append(("move_to", handle))


class FakeTableDriver(FakeDriver):
    """
    Paginated, virtualized table.

    ``pages`` lists the batch sizes of every page, e.g. ``[[10, 10], [5]]``.
    Row keys restart at 1 on each page. Only the first batch of a page is
    rendered up front; each further batch renders once the last row of the
    previous one has been scrolled into view. The next-page icon is shown
    while pages remain.
    """

    ROW_QUERY_RE = re.compile(r"@data-key > '([^']*)'")

    def __init__(
        self,
        pages: List[List[int]],
        next_icon_query: Query,
        clock: Optional[FakeClock] = None,
        keyless_row: Optional[int] = None,
    ):
        super().__init__(clock)
        self.pages = pages
        self.page_index = 0
        self.keyless_row = keyless_row
        self.cursors: List[str] = []
        self.next_icon = FakeElement(text="next")
        self.register(next_icon_query, self._next_icon_elements)
        self._load_page()

    def _load_page(self) -> None:
        self.batches: List[List[FakeElement]] = []
        key = 1
        for size in self.pages[self.page_index]:
            batch = []
            for _ in range(size):
                attributes = {} if key == self.keyless_row else {"data-key": str(key)}
                batch.append(FakeElement(text=f"row {key}", attributes=attributes))
                key += 1
            self.batches.append(batch)
        self.rendered = 1 if self.batches else 0

    def _next_icon_elements(self) -> List[FakeElement]:
        if self.page_index < len(self.pages) - 1:
            return [self.next_icon]
        return []

    def find_elements(self, query: Query) -> List[Any]:
        match = self.ROW_QUERY_RE.search(query.selector)
        if match is None:
            return super().find_elements(query)
        self.queries.append(query)
        cursor = match.group(1)
        if not self.cursors or self.cursors[-1] != cursor:
            self.cursors.append(cursor)
        threshold = float(cursor)
        rows = [row for batch in self.batches[:self.rendered] for row in batch]
        return [
            row for row in rows
            if float(row.attributes.get("data-key", threshold + 1)) > threshold
        ]

    def scroll_into_view(self, handle: FakeElement) -> None:
        super().scroll_into_view(handle)
        if self.rendered and handle is self.batches[self.rendered - 1][-1]:
            self.rendered = min(self.rendered + 1, len(self.batches))

    def click(self, handle: FakeElement) -> None:
        super().click(handle)
        if handle is self.next_icon:
            self.page_index += 1
            self._load_page()
