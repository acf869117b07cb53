"""
Test suites package.

Kept importable so that:
  - unit tests can share fakes (appconsole_testsuites.unit.fakes)
  - programmatic runners (e.g., `run_tests.py`) can address suites by path

All content is demo-safe and does not include production secrets.
"""
