"""
================================================================================
Side Navigation UI Test Cases
================================================================================
"""

import allure
import pytest

from appconsole_testsuites.ui_testing.pages import ApplicationsPage, DashboardPage, SideNavMenu


@allure.feature("Navigation")
@allure.story("Side navigation menu")
@pytest.mark.ui
@pytest.mark.e2e
@pytest.mark.P2
@pytest.mark.regression
def test_navigate_to_applications_from_side_nav(
    logged_in_dashboard: DashboardPage,
    side_nav_menu: SideNavMenu,
    applications_page: ApplicationsPage,
):
    """The Applications side-nav entry opens the applications page."""
    side_nav_menu.navigate_to_menu_from_side_nav("Applications")

    applications_page.wait_for_applications_page_to_load()
