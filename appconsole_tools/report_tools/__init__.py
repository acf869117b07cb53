"""Allure reporting helpers."""

from .allure_utils import (
    attach_json,
    attach_png,
    attach_text,
    save_failure_screenshot,
    screenshot_filename,
)

__all__ = [
    "attach_json",
    "attach_png",
    "attach_text",
    "save_failure_screenshot",
    "screenshot_filename",
]
