"""
================================================================================
Side Navigation Menu
================================================================================
"""

from __future__ import annotations

import allure

from appconsole_testsuites.ui_testing.framework.locator import LocatorTemplate
from appconsole_testsuites.ui_testing.framework.page_base import BasePage


class SideNavMenu(BasePage):
    """Side navigation menu shared by every signed-in page."""

    SIDE_NAV_MENU = LocatorTemplate.xpath(
        "//*[contains(@class, 'apphome_menuWrapper')][following-sibling::label[text()='%s']]"
    )
    PROFILE_USERNAME = LocatorTemplate.xpath("//p[contains(@class, 'userName')]")

    @allure.step("Navigate to menu from side nav: {menu_name}")
    def navigate_to_menu_from_side_nav(self, menu_name: str) -> None:
        """
        Click a side navigation entry, then move the pointer away so the
        expanded menu collapses.
        """
        self.actions.click(self.SIDE_NAV_MENU, "Side Nav Menu", menu_name)
        self.actions.move_to(self.PROFILE_USERNAME, "Profile Username")
