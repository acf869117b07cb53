import pytest

from appconsole_testsuites.ui_testing.framework.config_loader import UiSettings
from appconsole_testsuites.ui_testing.framework.wait_engine import WaitEngine
from appconsole_testsuites.ui_testing.pages.applications_page import (
    CURSOR_SENTINEL,
    ApplicationsPage,
    PaginationError,
)

from appconsole_testsuites.unit.fakes import FakeClock, FakeDriver, FakeElement, FakeTableDriver


NEXT_ICON = ApplicationsPage.TABLE_NEXT_PAGE_ICON.resolve()
SETTINGS = UiSettings(batch_timeout=10, next_page_timeout=5)


def make_page(driver, clock):
    engine = WaitEngine(driver, default_timeout=10, poll_interval=0.5, clock=clock, sleep=clock.sleep)
    return ApplicationsPage(driver, SETTINGS, engine)


def table(pages, **kwargs):
    clock = FakeClock()
    driver = FakeTableDriver(pages, NEXT_ICON, clock=clock, **kwargs)
    return driver, make_page(driver, clock)


def test_counts_rows_across_lazy_batches():
    driver, page = table([[10, 10, 4]])

    assert page.get_applications_row_count() == 24
    assert driver.cursors == [CURSOR_SENTINEL, "10", "20", "24"]


def test_counts_rows_across_pages_and_resets_cursor():
    driver, page = table([[10, 10], [5]])

    assert page.get_applications_row_count() == 25
    assert driver.cursors == [CURSOR_SENTINEL, "10", "20", CURSOR_SENTINEL, "5"]
    assert ("click", driver.next_icon) in driver.calls


def test_empty_table_counts_zero():
    driver, page = table([[]])

    assert page.get_applications_row_count() == 0
    assert not any(op == "scroll_into_view" for op, _ in driver.calls)


def test_cursor_strictly_increases_within_a_page():
    driver, page = table([[3, 3, 3, 3]])

    page.get_applications_row_count()

    numeric = [float(c) for c in driver.cursors]
    assert numeric == sorted(numeric)
    assert len(set(numeric)) == len(numeric)


def test_count_is_stable_for_identical_tables():
    first = table([[10, 2], [7], [1]])[1].get_applications_row_count()
    second = table([[10, 2], [7], [1]])[1].get_applications_row_count()

    assert first == second == 20


def test_last_row_of_each_batch_is_scrolled_into_view():
    driver, page = table([[2, 2]])

    page.get_applications_row_count()

    scrolled = [e.attributes["data-key"] for op, e in driver.calls if op == "scroll_into_view"]
    assert scrolled == ["2", "4"]


def test_missing_row_key_raises_pagination_error():
    driver, page = table([[10]], keyless_row=10)

    with pytest.raises(PaginationError, match="data-key"):
        page.get_applications_row_count()


def test_non_advancing_cursor_raises_pagination_error():
    clock = FakeClock()
    driver = FakeDriver(clock)
    stuck = ApplicationsPage.TABLE_ROW_WITH_DATA_KEY.resolve(CURSOR_SENTINEL)
    driver.register(stuck, [FakeElement(attributes={"data-key": CURSOR_SENTINEL})])
    page = make_page(driver, clock)

    with pytest.raises(PaginationError, match="did not advance"):
        page.get_applications_row_count()


def test_driver_errors_propagate():
    clock = FakeClock()
    driver = FakeDriver(clock)
    driver.fail_on(
        ApplicationsPage.TABLE_ROW_WITH_DATA_KEY.resolve(CURSOR_SENTINEL),
        RuntimeError("stale session"),
    )
    page = make_page(driver, clock)

    with pytest.raises(RuntimeError, match="stale session"):
        page.get_applications_row_count()


def test_wait_for_page_to_load_waits_for_each_region():
    clock = FakeClock()
    driver = FakeDriver(clock)
    for locator in (
        ApplicationsPage.APPLICATIONS_HEADER,
        ApplicationsPage.CARD_CONTAINER,
        ApplicationsPage.TABLE_CONTAINER,
    ):
        driver.register(locator.resolve(), [FakeElement()])
    page = make_page(driver, clock)

    page.wait_for_applications_page_to_load()

    assert [str(q) for q in driver.queries] == [
        str(ApplicationsPage.APPLICATIONS_HEADER.resolve()),
        str(ApplicationsPage.CARD_CONTAINER.resolve()),
        str(ApplicationsPage.TABLE_CONTAINER.resolve()),
    ]


def test_page_uses_pagination_timeouts_from_settings():
    clock = FakeClock()
    page = make_page(FakeDriver(clock), clock)

    assert page.batch_timeout == 10
    assert page.next_page_timeout == 5
