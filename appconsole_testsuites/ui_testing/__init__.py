"""UI testing: framework, page objects and end-to-end tests."""
