"""
================================================================================
Applications Page Object
================================================================================

Applications list: a paginated table whose rows are rendered lazily
(virtualized) and identified by a monotonic ``data-key`` attribute.

Counting rows (get_applications_row_count):

    FETCHING_BATCH ──non-empty──> ADVANCING_CURSOR ──> FETCHING_BATCH
          │
        empty
          v
    CHECKING_NEXT_PAGE ──control visible──> CLICKING_NEXT ──> FETCHING_BATCH
          │                                   (cursor reset)
        absent
          v
         DONE

Rows are fetched by key ("data-key greater than cursor") rather than by
position, because a virtualized table only materializes a window of rows and
positional indices shift as it scrolls. Scrolling the last row of each batch
into view makes the table render the next window.

================================================================================
"""

from __future__ import annotations

from typing import Any, List, Optional

import allure

from appconsole_testsuites.ui_testing.framework.config_loader import UiSettings
from appconsole_testsuites.ui_testing.framework.driver import Driver
from appconsole_testsuites.ui_testing.framework.locator import LocatorTemplate
from appconsole_testsuites.ui_testing.framework.page_base import BasePage
from appconsole_testsuites.ui_testing.framework.wait_engine import WaitEngine


CURSOR_SENTINEL = "-1"
ROW_KEY_ATTRIBUTE = "data-key"


class PaginationError(RuntimeError):
    """Raised when the table cannot be traversed (missing or non-advancing row keys)."""
    pass


class ApplicationsPage(BasePage):
    """Applications page object."""

    APPLICATIONS_HEADER = LocatorTemplate.xpath(
        "//*[contains(@class, 'menuHeading')]/descendant::*[text()='Applications']"
    )
    CARD_CONTAINER = LocatorTemplate.xpath("//*[contains(@class, 'cardContainer')]")
    TABLE_CONTAINER = LocatorTemplate.xpath("//*[contains(@class, 'tableContainer')]")
    TABLE_ROW_WITH_DATA_KEY = LocatorTemplate.xpath(
        "//*[@data-key > '%s'][descendant::*[@role='row']]"
    )
    TABLE_NEXT_PAGE_ICON = LocatorTemplate.xpath(
        "//button[contains(@class, 'footerButton')][last()][not(contains(@class, 'disabled'))]"
    )

    def __init__(
        self,
        driver: Driver,
        settings: Optional[UiSettings] = None,
        engine: Optional[WaitEngine] = None,
    ):
        super().__init__(driver, settings, engine)
        self.batch_timeout = self.settings.batch_timeout
        self.next_page_timeout = self.settings.next_page_timeout

    @allure.step("Wait for applications page to load")
    def wait_for_applications_page_to_load(self) -> None:
        """Wait for the header, summary cards and table to be visible."""
        self.actions.wait_for_visible(self.APPLICATIONS_HEADER, "Applications Header")
        self.actions.wait_for_visible(self.CARD_CONTAINER, "Card Container")
        self.actions.wait_for_visible(self.TABLE_CONTAINER, "Table Container")

    @allure.step("Count application rows across all pages")
    def get_applications_row_count(self) -> int:
        """
        Count every row of the applications table, across all pages.

        Returns:
            Total number of application rows

        Raises:
            PaginationError: If a row has no key or the cursor stops advancing
        """
        total_rows = 0
        page_number = 1

        while True:
            cursor = CURSOR_SENTINEL
            while True:
                rows = self._fetch_batch(cursor)
                if not rows:
                    break
                total_rows += len(rows)
                cursor = self._advance_cursor(cursor, rows[-1])
                self.actions.scroll_into_view(rows[-1], "Last Visible Row")

            if not self.actions.is_visible(
                self.TABLE_NEXT_PAGE_ICON,
                "Enabled Table Next Page Icon",
                timeout=self.next_page_timeout,
            ):
                break

            self.actions.click(self.TABLE_NEXT_PAGE_ICON, "Enabled Table Next Page Icon")
            page_number += 1
            self.log.debug(f"Advanced to table page {page_number} ({total_rows} rows so far)")

        self.log.info(f"Counted {total_rows} application rows over {page_number} page(s)")
        return total_rows

    def _fetch_batch(self, cursor: str) -> List[Any]:
        """Rows whose key is strictly greater than ``cursor``; empty when none render."""
        return self.actions.get_all(
            self.TABLE_ROW_WITH_DATA_KEY,
            "Table Rows with Data Key",
            self.batch_timeout,
            cursor,
        )

    def _advance_cursor(self, cursor: str, last_row: Any) -> str:
        key = self.driver.get_attribute(last_row, ROW_KEY_ATTRIBUTE)
        if key is None:
            raise PaginationError(
                f"Last visible row has no '{ROW_KEY_ATTRIBUTE}' attribute"
            )
        if key == cursor:
            raise PaginationError(
                f"Row cursor did not advance past {cursor!r}; the table keeps "
                f"returning the same rows"
            )
        return key


__all__ = [
    "ApplicationsPage",
    "PaginationError",
    "CURSOR_SENTINEL",
    "ROW_KEY_ATTRIBUTE",
]
