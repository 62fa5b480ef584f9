"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~instaquery.exceptions.InstaqueryError` subclass.
Shell wrappers can inspect the exit code to tell a missing token apart from
an unreachable API without parsing stderr.

Example::

    $ instaquery query users/self
    $ echo $?
    3   # EXIT_AUTH_FAILURE -- no access token configured
"""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or missing required parameters."""

EXIT_AUTH_FAILURE = 3
"""No access token was available for the request."""

EXIT_CONNECTION_ERROR = 6
"""The request did not succeed (network error or non-2xx response)."""
