"""Role-based Playwright scaffolding for the SauceDemo end-to-end suite."""

__version__ = "1.0.0"
