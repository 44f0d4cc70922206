"""
Document store exceptions.
"""


class DataStoreError(Exception):
    """Base exception for document store errors."""
    pass


class DataStoreTimeoutError(DataStoreError):
    """Exception raised when a document store request times out."""
    pass


class DataStoreResponseError(DataStoreError):
    """Exception raised when the document store returns an error or a malformed payload."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code
