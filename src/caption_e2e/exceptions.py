"""
Custom exceptions for the caption-e2e suite.

Setup errors abort a case before it runs. Locate timeouts fail it with
a "not found" signal. Plain assertion failures stay ordinary
``AssertionError`` instances.
"""

from typing import Any, Optional


class CaptionE2EError(Exception):
    """Base exception for all caption-e2e errors."""

    def __init__(self, message: str,
                 details: Optional[dict[str, Any]] = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


# Session Exceptions
class SessionError(CaptionE2EError):
    """Base exception for browser session errors."""


class SessionSetupError(SessionError):
    """Raised when a browser session cannot be started."""

    def __init__(
        self,
        browser: str,
        reason: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize session setup error.

        Args:
            browser: Name of the browser that failed to launch.
            reason: What went wrong (missing binary, driver mismatch, ...).
            details: Optional dictionary with additional error details.
        """
        super().__init__(
            f"Could not start {browser} session: {reason}", details)
        self.browser = browser
        self.reason = reason


# Locator Exceptions
class ElementNotFoundError(CaptionE2EError):
    """Raised when an expected element never became visible."""

    def __init__(
        self,
        description: str,
        timeout: float,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize element not found error.

        Args:
            description: Human-readable name of the element.
            timeout: Seconds waited before giving up.
            details: Optional dictionary with additional error details.
        """
        super().__init__(
            f"Element not found: {description} (waited {timeout:g}s)",
            details,
        )
        self.description = description
        self.timeout = timeout


# Configuration Exceptions
class ConfigurationError(CaptionE2EError):
    """Base exception for configuration-related errors."""


class MissingConfigError(ConfigurationError):
    """Raised when a required configuration value is missing."""

    def __init__(
        self, config_key: str, details: Optional[dict[str, Any]] = None
    ) -> None:
        """
        Initialize missing config error.

        Args:
            config_key: The missing configuration key.
            details: Optional dictionary with additional error details.
        """
        super().__init__(
            f"Missing required configuration: '{config_key}'", details)
        self.config_key = config_key


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value is invalid."""

    def __init__(
        self,
        config_key: str,
        value: Any,
        reason: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize invalid config error.

        Args:
            config_key: The configuration key with invalid value.
            value: The invalid value.
            reason: Optional reason why the value is invalid.
            details: Optional dictionary with additional error details.
        """
        message = f"Invalid configuration value for '{config_key}': {value}"
        if reason:
            message += f" - {reason}"
        super().__init__(message, details)
        self.config_key = config_key
        self.value = value
        self.reason = reason
