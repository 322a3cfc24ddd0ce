"""Per-case state handed explicitly to every flow helper."""

from dataclasses import dataclass, field

from playwright.async_api import Page

from .config import Settings
from .credentials import TestCredentials
from .pages import DashboardPage, LandingPage
from .reporting import AdvisoryResults
from .session import SessionHandle


@dataclass
class CaseContext:
    """Everything one test case owns: its session, account and findings."""

    settings: Settings
    session: SessionHandle
    credentials: TestCredentials = field(default_factory=TestCredentials)
    advisories: AdvisoryResults = field(default_factory=AdvisoryResults)

    @property
    def page(self) -> Page:
        return self.session.page

    @property
    def landing(self) -> LandingPage:
        return LandingPage(self.page, self.settings)

    @property
    def dashboard(self) -> DashboardPage:
        return DashboardPage(self.page, self.settings)
