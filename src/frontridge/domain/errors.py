"""Error taxonomy shared by services and the HTTP layer."""


class FrontRidgeError(Exception):
    """Base class for errors that map onto an HTTP outcome."""

    status_code = 500
    default_message = "Internal Server Error"

    @property
    def public_message(self) -> str:
        """Message that is safe to return to the client."""
        return str(self) or self.default_message


class ConfigurationError(FrontRidgeError):
    """A required secret, credential or provider setting is missing."""

    @property
    def public_message(self) -> str:
        return self.default_message


class ValidationError(FrontRidgeError):
    """Client input is missing or malformed."""

    status_code = 400
    default_message = "Invalid request"


class NotAuthenticatedError(FrontRidgeError):
    """The caller has no valid admin session."""

    status_code = 401
    default_message = "Not Authenticated"

    @property
    def public_message(self) -> str:
        return self.default_message


class NotFoundError(FrontRidgeError):
    """The target record does not exist."""

    status_code = 404
    default_message = "Not found"


class UploadError(FrontRidgeError):
    """The object storage provider rejected or failed an upload."""

    default_message = "Image upload failed"


class StoreError(FrontRidgeError):
    """The document store failed to complete an operation."""

    default_message = "Database operation failed"


class DeliveryError(FrontRidgeError):
    """The email provider failed to deliver a message."""

    default_message = "Failed to send email. Please try again."

    @property
    def public_message(self) -> str:
        return self.default_message
