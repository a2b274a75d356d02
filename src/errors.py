"""Domain exceptions shared by repositories, services and the API layer.

Services raise these; the API maps them to HTTP status codes in
``src.main`` so routes stay free of translation boilerplate.
"""


class PortalError(Exception):
    """Base class for portal errors.

    ``message_key`` names a translation used as the user-facing detail;
    without one the raw message is shown.
    """

    status_code = 500
    message_key: str | None = None

    def __init__(self, message: str = "", message_key: str | None = None):
        super().__init__(message)
        if message_key is not None:
            self.message_key = message_key


class BackendError(PortalError):
    """The database rejected the statement (constraint, bad SQL, ...).

    The raw message is surfaced to the caller unchanged.
    """

    status_code = 400


class BackendUnavailableError(PortalError):
    """The database could not be reached."""

    status_code = 503
    message_key = "common.genericError"


class AuthenticationError(PortalError):
    """Missing, unknown or expired credentials."""

    status_code = 401


class PermissionDeniedError(PortalError):
    """Caller is signed in but not allowed to perform the action."""

    status_code = 403


class NotFoundError(PortalError):
    """Requested row does not exist."""

    status_code = 404
    message_key = "common.notFound"


class InvalidTransitionError(PortalError):
    """Status change not allowed from the current state."""

    status_code = 409


class DuplicateAccountError(PortalError):
    """Sign-up with an e-mail that already has an account."""

    status_code = 409


class FileTooLargeError(PortalError):
    """Upload exceeds the configured size ceiling."""

    status_code = 413


class ValidationFailedError(PortalError):
    """Input is well-formed but breaks a business rule."""

    status_code = 422
