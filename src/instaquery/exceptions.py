"""Exception hierarchy for instaquery.

All exceptions inherit from :class:`InstaqueryError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`instaquery.exit_codes`.
:meth:`~instaquery.client.Client.query` never raises; these exceptions are
used by configuration loading and by the CLI, which turns a failed
:class:`~instaquery.result.QueryResult` into one of them.

Subclass hierarchy::

    InstaqueryError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- AuthError           (exit 3)
    +-- ConnectionError_    (exit 6)
    +-- ConfigError         (exit 1)
"""

from instaquery.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
)


class InstaqueryError(Exception):
    """Base exception for all instaquery errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(InstaqueryError):
    """Raised for invalid CLI arguments or unknown config keys."""

    exit_code = EXIT_INVALID_USAGE


class AuthError(InstaqueryError):
    """Raised when a query is attempted without an access token."""

    exit_code = EXIT_AUTH_FAILURE


class ConnectionError_(InstaqueryError):
    """Raised when the API request fails (network error or non-2xx status).

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """

    exit_code = EXIT_CONNECTION_ERROR


class ConfigError(InstaqueryError):
    """Raised for configuration problems (invalid JSON, unknown cache backend)."""

    exit_code = EXIT_GENERIC_FAILURE
