"""
Repository-level pytest configuration (showcase-safe).

Why this exists:
  - Pin the configuration environment for local runs
  - Log each test's start and outcome the same way in every suite

Important:
  Credentials in config/sandbox.yaml are placeholders. Real runs should
  provide UI_EMAIL / UI_PASSWORD from a secret manager in CI/CD.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest
from loguru import logger


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """Default to the sandbox configuration unless the user/CI chose one."""
    os.environ.setdefault("ENV", "sandbox")
    yield


def pytest_runtest_logstart(nodeid, location):
    logger.info(f"<=========== Test Started : {location[2]} ===========>")


def pytest_runtest_logreport(report):
    name = report.nodeid.split("::")[-1]
    if report.skipped and report.when in ("setup", "call"):
        logger.warning(f"<=========== Test Skipped : {name} ===========>\n")
    elif report.failed:
        logger.error(f"<=========== Test Failed : {name} ===========>\n{report.longreprtext}")
    elif report.passed and report.when == "call":
        logger.info(f"<=========== Test Passed : {name} ===========>\n")
