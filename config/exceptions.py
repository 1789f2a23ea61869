"""Custom exception hierarchy for Hostname Menu.

Provides specific exceptions for the few things that can go wrong:
reading or writing the preferences file, invalid settings input, and
system query commands.
"""

from typing import Optional


class HostnameMenuError(Exception):
    """Base exception for all Hostname Menu errors.

    All custom exceptions in this application inherit from this class so
    callers can catch application-specific errors with a single clause.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class StorageError(HostnameMenuError):
    """Preferences persistence errors.

    Raised when config.json cannot be written, e.g. missing permissions
    on the application support directory.

    Examples:
        >>> raise StorageError("Failed to save config", {"path": "/path/to/config.json"})
    """

    pass


class ConfigurationError(HostnameMenuError):
    """Invalid settings values.

    Raised when the settings form contains an unknown key, a malformed
    value, or a value of the wrong type.

    Examples:
        >>> raise ConfigurationError("Invalid max width", {"value": "wide"})
    """

    pass


class SubprocessError(HostnameMenuError):
    """Subprocess execution errors.

    Raised when a system query command is not allowed, cannot be found,
    or times out.

    Attributes:
        command: The command that failed.
        returncode: Exit code if available.
        stdout: Standard output if available.
        stderr: Standard error if available.

    Examples:
        >>> raise SubprocessError(
        ...     "Command failed",
        ...     command=["scutil", "--get", "ComputerName"],
        ...     returncode=1,
        ... )
    """

    def __init__(
        self,
        message: str,
        command: Optional[list] = None,
        returncode: Optional[int] = None,
        stdout: Optional[str] = None,
        stderr: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        details = details or {}
        if command:
            details["command"] = command
        if returncode is not None:
            details["returncode"] = returncode
        if stdout:
            details["stdout"] = stdout[:500]
        if stderr:
            details["stderr"] = stderr[:500]

        super().__init__(message, details)
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
