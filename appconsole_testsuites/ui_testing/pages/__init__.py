"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for App Console pages.

Each page class encapsulates:
    - Element locators (LocatorTemplate constants)
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .dashboard_page import DashboardPage
from .side_nav_menu import SideNavMenu
from .applications_page import ApplicationsPage, PaginationError

__all__ = [
    "LoginPage",
    "DashboardPage",
    "SideNavMenu",
    "ApplicationsPage",
    "PaginationError",
]
