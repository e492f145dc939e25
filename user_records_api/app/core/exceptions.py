"""
Exceptions shared by the storage gateway, the service layer and the API.
"""


class StoreError(Exception):
    """The store rejected a request."""


class StoreUnavailable(StoreError):
    """The store could not be reached (connection or transport failure)."""


class RecordNotFound(Exception):
    """No record exists under the requested id."""

    def __init__(self, record_id: str):
        super().__init__(f"User {record_id} not found")
        self.record_id = record_id


class ServiceError(Exception):
    """A service operation failed.

    ``message`` is the fixed, caller-safe text returned in the HTTP
    response; the underlying cause is only logged.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
