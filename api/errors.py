"""
Exceptions raised by the query layer and rendered by the API.

Each error maps to one HTTP status and one response key: validation and
storage failures answer with {"error": ...}, empty results with
{"message": ...}.
"""


class CatalogError(Exception):
    status_code: int = 500
    body_key: str = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict:
        return {self.body_key: self.message}


class InvalidParameterError(CatalogError):
    """Missing or malformed path parameter."""
    status_code = 400


class FirearmNotFoundError(CatalogError):
    """A filter matched zero records."""
    status_code = 404
    body_key = "message"


class StorageError(CatalogError):
    """The database rejected or failed a read."""
    status_code = 500
