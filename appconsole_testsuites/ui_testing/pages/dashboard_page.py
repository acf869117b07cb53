"""
================================================================================
Dashboard Page Object
================================================================================

Landing page after sign-in: summary cards with counts and the signed-in
user's profile name.

================================================================================
"""

from __future__ import annotations

import allure

from appconsole_testsuites.ui_testing.framework.locator import LocatorTemplate
from appconsole_testsuites.ui_testing.framework.page_base import BasePage


class DashboardPage(BasePage):
    """Dashboard page object."""

    MANAGED_APPLICATIONS = "Managed Applications"

    DASHBOARD_HEADER = LocatorTemplate.xpath("//h2[text()='Dashboard']")
    CARD_TITLE = LocatorTemplate.xpath("//p[contains(@class, 'cardTitle') and text()='%s']")
    PROFILE_USERNAME = LocatorTemplate.xpath("//p[contains(@class, 'userName') and text()='%s']")
    CARD_COUNT_TEXT = LocatorTemplate.xpath(
        "//*[contains(@class, 'cardDetail')]"
        "[descendant::*[text()='%s']]/descendant::*[contains(@class, 'countText')]"
    )

    @allure.step("Verify user {email} is logged in to dashboard")
    def is_user_logged_in_to_dashboard(self, email: str) -> bool:
        """
        Check the dashboard is shown for the given user.

        Waits for the "Managed Applications" card and the profile name,
        then reports whether the dashboard header is visible.

        Raises:
            WaitTimeoutError: If the card or profile name never appears
        """
        self.actions.wait_for_visible(self.CARD_TITLE, "Card Title", self.MANAGED_APPLICATIONS)
        self.actions.wait_for_visible(self.PROFILE_USERNAME, "Profile Username", email)
        return self.actions.is_visible(self.DASHBOARD_HEADER, "Dashboard Header")

    @allure.step("Get count of card: {card_title}")
    def get_count_text_of_card(self, card_title: str) -> int:
        """
        Read the count shown on a dashboard card.

        Raises:
            ValueError: If the card text is not an integer
        """
        count_text = self.actions.get_text(self.CARD_COUNT_TEXT, "Card Count Text", card_title)
        return int(count_text.strip().replace(",", ""))

    @allure.step("Navigate to card menu: {card_title}")
    def navigate_to_card_menu(self, card_title: str) -> None:
        """Open the page behind a dashboard card."""
        self.actions.click(self.CARD_TITLE, "Card Title", card_title)
