"""
Demo Setup Exceptions

Exception types for fatal setup failures, each carrying a remediation hint.
"""

from typing import Optional


class SetupError(Exception):
    """Base exception for all demo setup errors."""

    def __init__(
        self,
        message: str,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        """Initialize the error.

        Args:
            message: Human-readable error message
            remediation: Suggested fix for the user
            details: Technical details for debugging
        """
        super().__init__(message)
        self.message = message
        self.remediation = remediation
        self.details = details

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.remediation:
            parts.append(f"To fix: {self.remediation}")
        return "\n".join(parts)


class ConfigError(SetupError):
    """Configuration file errors."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.config_key = config_key
        if not remediation and config_key:
            remediation = f"Check the value of '{config_key}' in your demo-setup config file"
        super().__init__(message, remediation, details)


class NetworkError(SetupError):
    """Network-related errors (timeouts, connection issues)."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.endpoint = endpoint
        if not remediation:
            remediation = "Check your internet connection and run 'demo-setup run' again."
        super().__init__(message, remediation, details)


class BootstrapError(SetupError):
    """The package manager install script failed."""

    def __init__(
        self,
        message: str,
        exit_code: Optional[int] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.exit_code = exit_code
        if not remediation:
            remediation = "Run the terminal as Administrator and try again, or install Chocolatey manually from https://chocolatey.org/install"
        super().__init__(message, remediation, details)


class SettingsError(SetupError):
    """An editor settings file could not be parsed."""

    def __init__(
        self,
        message: str,
        settings_path: Optional[str] = None,
        remediation: Optional[str] = None,
        details: Optional[str] = None
    ):
        self.settings_path = settings_path
        if not remediation and settings_path:
            remediation = f"Fix or remove {settings_path} and run 'demo-setup theme' again"
        super().__init__(message, remediation, details)


# Error code mapping for CLI exit codes
ERROR_CODES = {
    ConfigError: 10,
    NetworkError: 13,
    BootstrapError: 15,
    SettingsError: 16,
    SetupError: 1,
}


def get_error_code(error: Exception) -> int:
    """Get the exit code for an error type."""
    for error_type, code in ERROR_CODES.items():
        if isinstance(error, error_type):
            return code
    return 1
