"""
================================================================================
App Console Tools
================================================================================

Supporting utilities for the App Console test suites.

Modules:
    - common: Logging setup and filesystem helpers
    - report_tools: Allure attachments and failure screenshots

Example:
    from appconsole_tools.common import init_logger
    from appconsole_tools.report_tools import save_failure_screenshot

    init_logger(level="DEBUG")

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
