"""Exception hierarchy for togglpy.

Every error is terminal for a run: nothing is retried, the CLI prints the
first error it sees and exits.
"""


class TogglError(Exception):
    """Base class for all togglpy errors."""


class InvalidSelector(TogglError):
    """Raised for a period selector other than "This week" or "Last week"."""


class ConfigError(TogglError):
    """Raised when the token, workspace or timezone cannot be resolved."""


class ApiError(TogglError):
    """Base class for failures talking to the Toggl Track API."""


class AuthError(ApiError):
    """Raised when the API rejects the token (401/403)."""


class NetworkError(ApiError):
    """Raised when the API cannot be reached or answers with an error status."""


class UnexpectedResponseShape(ApiError):
    """Raised when a response body is not the JSON structure we expect."""


class MalformedSummary(TogglError):
    """Raised when a summary payload is missing fields needed for the report."""
