"""
urlsucker/utils/exceptions.py

Custom exceptions for the project.
"""


class UrlSuckerError(Exception):
    """
    Base class for all urlsucker errors.
    """
    pass


class InvalidRequestUrlError(UrlSuckerError, ValueError):
    """
    Raised when an outbound request cannot be built because the URL is not
    an absolute http(s) URL.
    """
    pass


class HostActionError(UrlSuckerError):
    """
    Raised when the host runtime fails to carry out a "send to tool" action.
    """

    def __init__(self, action: str, url: str, cause: Exception | None = None) -> None:
        self.action = action
        self.url = url
        self.cause = cause
        message = f"{action} failed for {url}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class CaptureFileNotFoundError(UrlSuckerError, FileNotFoundError):
    """
    Raised when a JSONL capture file does not exist.
    """
    pass
