"""
Standard exit codes for relfinder commands.

Following Unix/POSIX conventions for command-line tools.
"""
import click

from .results import Status

# Standard POSIX exit codes
SUCCESS = 0              # Successful termination
GENERAL_ERROR = 1        # General errors

# Application-specific exit codes (64-113 are typically available)
NOT_FOUND = 64           # Upstream has no such project, or no releases
UNAVAILABLE = 65         # Upstream API failed or returned garbage
NO_PROVIDER = 66         # No provider recognizes the source reference
CONFIG_ERROR = 67        # Configuration file error

STATUS_EXIT_CODES = {
    Status.OK: SUCCESS,
    Status.NOT_FOUND: NOT_FOUND,
    Status.UNAVAILABLE: UNAVAILABLE,
}


def exit_code_for_status(status: Status) -> int:
    """
    Get the exit code that reports a provider Status.

    Args:
        status: Outcome of a provider lookup

    Returns:
        Appropriate exit code
    """
    return STATUS_EXIT_CODES.get(status, GENERAL_ERROR)


class CommandError(click.ClickException):
    """
    Exception that commands can raise to indicate specific exit codes.

    click prints the message to stderr and exits with exit_code.
    """
    def __init__(self, message: str, exit_code: int = GENERAL_ERROR):
        super().__init__(message)
        self.exit_code = exit_code


class NoProviderError(CommandError):
    """Raised when no provider recognizes a source reference."""
    def __init__(self, query: str):
        super().__init__(f"No provider recognizes {query!r}", NO_PROVIDER)
        self.query = query


class ReleaseLookupError(CommandError):
    """Raised when a provider reports anything but Status.OK."""
    def __init__(self, provider_name: str, project_id: str, status: Status):
        if status == Status.NOT_FOUND:
            message = f"{provider_name}: no releases found for {project_id}"
        else:
            message = f"{provider_name}: upstream unavailable for {project_id}"
        super().__init__(message, exit_code_for_status(status))
        self.status = status
