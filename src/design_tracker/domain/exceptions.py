"""Error taxonomy shared by the service, the API layer and the client."""


class DesignTrackerError(Exception):
    """Base class for all Design Tracker errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DesignTrackerError):
    """A required field is missing or a value is outside its allowed set."""

    status_code = 400


class NotFoundError(DesignTrackerError):
    """No document matches the given identifier."""

    status_code = 404


class ConflictError(DesignTrackerError):
    """The write would duplicate an existing unique value."""

    status_code = 409


class StoreError(DesignTrackerError):
    """The document store failed or rejected the query (including malformed identifiers)."""

    status_code = 500
