"""
Throwaway account credentials for sign-up scenarios.

Every case registers its own account so runs never collide on an email
that an earlier run already claimed.
"""

import random
import string
import time
from dataclasses import dataclass, field

EMAIL_ALPHABET = string.ascii_lowercase + string.digits
EMAIL_TOKEN_LENGTH = 8
EMAIL_DOMAIN = "example.com"
DEFAULT_PASSWORD = "TestPass123!@#"

_rng = random.SystemRandom()


def generate_random_email() -> str:
    """Return an address of the form ``test_<8 chars>@example.com``."""
    token = "".join(_rng.choices(EMAIL_ALPHABET, k=EMAIL_TOKEN_LENGTH))
    return f"test_{token}@{EMAIL_DOMAIN}"


def generate_test_name() -> str:
    """Return a display name stamped with the current epoch millis."""
    return f"Test User {int(time.time() * 1000)}"


@dataclass
class TestCredentials:
    """Credentials for one freshly registered test account."""

    __test__ = False  # not a pytest test class

    email: str = field(default_factory=generate_random_email)
    password: str = DEFAULT_PASSWORD
    name: str = field(default_factory=generate_test_name)
