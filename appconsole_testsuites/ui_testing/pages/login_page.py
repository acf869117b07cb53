"""
================================================================================
Login Page Object
================================================================================

Sign-in form of the App Console.

NOTE:
  The password is typed through an element named "Password Field", which
  the element actions mask in every log line and report step.

================================================================================
"""

from __future__ import annotations

import allure

from appconsole_testsuites.ui_testing.framework.locator import LocatorTemplate
from appconsole_testsuites.ui_testing.framework.page_base import BasePage


class LoginPage(BasePage):
    """Login page object."""

    EMAIL_INPUT = LocatorTemplate.css("[name='emailField']")
    PASSWORD_INPUT = LocatorTemplate.css("[name='passField']")
    SIGN_IN_BUTTON = LocatorTemplate.xpath("//*[text()='Sign in']")

    def login(self, email: str, password: str) -> None:
        """
        Log in with the given credentials.

        Args:
            email: User email
            password: User password
        """
        with allure.step(f"Login (email={email})"):
            self.actions.send_keys(self.EMAIL_INPUT, "Email Field", email)
            self.actions.send_keys(self.PASSWORD_INPUT, "Password Field", password)
            self.actions.click(self.SIGN_IN_BUTTON, "Sign In Button")
