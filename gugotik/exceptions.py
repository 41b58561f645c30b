"""Custom exception classes for the GuGoTik SDK."""

from typing import Optional


class GuGoTikException(Exception):
    """
    Base exception class for all SDK errors.

    Carries the backend's status code/message when one was available so the
    caller can decide whether re-issuing the call makes sense.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        status_msg: Optional[str] = None,
        response: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.status_msg = status_msg
        self.response = response

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (status_code={self.status_code})"
        return self.message


class InvalidCallError(GuGoTikException):
    """
    Raised when a required argument is missing or invalid.

    Always raised before any network activity.
    """
    pass


class ApiRequestError(GuGoTikException):
    """
    Raised when a plain (non-upload) request fails at the transport level.
    """
    pass


class ChunkTransportError(GuGoTikException):
    """
    Raised when a single chunk's network call fails.

    Covers connection errors, timeouts, non-success HTTP statuses and
    malformed responses. The whole upload fails with this error.
    """

    def __init__(
        self,
        message: str,
        chunk_index: Optional[int] = None,
        status_code: Optional[int] = None,
        response: Optional[str] = None,
    ):
        super().__init__(message, status_code=status_code, response=response)
        self.chunk_index = chunk_index


class UploadExpiredError(ChunkTransportError):
    """
    Raised when an upload outlives the backend's temporary chunk storage.

    The continuation identifier can no longer be trusted; restart the upload.
    """
    pass


class BackendRejectionError(GuGoTikException):
    """
    Raised when the backend answers with a domain-level failure.

    The response was well formed but its status_code was not 0 (e.g. an
    invalid token). status_code/status_msg are the backend's, verbatim.
    """
    pass


class CallbackError(GuGoTikException):
    """
    Raised when the caller's progress callback raised.

    The exception the callback raised is chained as __cause__.
    """
    pass
