"""pagecheck - Integrations UI and render smoke-test harness."""

__version__ = "0.1.0"
