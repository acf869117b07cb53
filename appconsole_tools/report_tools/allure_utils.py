"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers for Allure reports, including the failure screenshot
captured by the UI test teardown.

Features:
- Text / JSON / PNG attachments
- Timestamped failure screenshots saved locally and attached

================================================================================
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Union

import allure
from loguru import logger


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, default=str)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_png(png: bytes, name: str = "Screenshot"):
    """
    Attach a PNG image to Allure report.

    Args:
        png: Image bytes
        name: Attachment name
    """
    allure.attach(
        png,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


# ================================================================================
# Failure Capture
# ================================================================================

def screenshot_filename(test_name: str, now: datetime = None) -> str:
    """Build a timestamped screenshot filename for a test."""
    timestamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    safe_name = "".join(c if c.isalnum() or c in "-_" else "_" for c in test_name)
    return f"{safe_name}_{timestamp}.png"


def save_failure_screenshot(
    capture: Callable[[], bytes],
    test_name: str,
    directory: Union[str, Path],
) -> Path:
    """
    Capture a screenshot, save it locally and attach it to Allure.

    Args:
        capture: Returns PNG bytes of the current browser view
        test_name: Name of the failed test
        directory: Directory for local copies

    Returns:
        Path of the saved screenshot
    """
    png = capture()

    dest_dir = Path(directory)
    dest_dir.mkdir(parents=True, exist_ok=True)
    dest_file = dest_dir / screenshot_filename(test_name)
    dest_file.write_bytes(png)

    attach_png(png, name=f"{test_name} - Failure Screenshot")
    logger.info(
        f"Screenshot captured and attached to Allure report. "
        f"Saved locally to: {dest_file.resolve()}"
    )
    return dest_file


__all__ = [
    "attach_json",
    "attach_text",
    "attach_png",
    "screenshot_filename",
    "save_failure_screenshot",
]
