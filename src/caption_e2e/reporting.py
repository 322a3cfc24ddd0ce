"""
Console markers and advisory check bookkeeping.

Advisory checks probe optional UI (copy buttons, history panels, ...).
Their negatives are logged as warnings and never fail a case.
"""

import logging
from typing import List, Tuple

logger = logging.getLogger(__name__)


class AdvisoryResults:
    """Track advisory check outcomes for one test case."""

    def __init__(self) -> None:
        self.passed: List[Tuple[str, str]] = []
        self.warnings: List[Tuple[str, str]] = []

    def record(self, check: str, ok: bool, details: str = "") -> bool:
        """Record an outcome and return it unchanged."""
        if ok:
            self.add_pass(check, details)
        else:
            self.add_warning(check, details or "not observed")
        return ok

    def add_pass(self, check: str, details: str = "") -> None:
        self.passed.append((check, details))
        logger.info("  advisory ok: %s %s", check, details)

    def add_warning(self, check: str, message: str) -> None:
        self.warnings.append((check, message))
        logger.warning("  advisory miss: %s (%s)", check, message)

    @property
    def all_passed(self) -> bool:
        return not self.warnings

    def summary(self) -> str:
        return (
            f"{len(self.passed)} advisory checks ok, "
            f"{len(self.warnings)} not observed"
        )


def mark_passed(case_number: int, summary: str) -> None:
    """Log the pass marker for a numbered case."""
    logger.info("✓ Test Case %d Passed: %s", case_number, summary)
