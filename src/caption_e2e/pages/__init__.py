"""
Page Object Model classes for the caption generator.

These classes provide reusable selectors and methods for interacting
with the landing page and the dashboard.
"""

from .base_page import BasePage
from .dashboard_page import DASHBOARD_PATH, DashboardPage
from .landing_page import TITLE_KEYWORDS, LandingPage

__all__ = [
    "BasePage",
    "DashboardPage",
    "LandingPage",
    "DASHBOARD_PATH",
    "TITLE_KEYWORDS",
]
