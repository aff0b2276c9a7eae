"""Exceptions raised by the Louvre collection client."""

from typing import Optional


class LouvreError(Exception):
    """Base class for collection client errors."""


class FetchError(LouvreError):
    """Raised when an HTTP request fails (network error or non-2xx status)."""

    def __init__(self, url: str, cause: Exception):
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause}")


class ExtractionError(LouvreError):
    """Raised when an HTML document is missing or cannot be parsed."""


class ResolutionError(LouvreError):
    """Raised when neither the JSON endpoint nor the HTML page yields a record."""

    def __init__(
        self,
        artwork_id: str,
        api_error: Optional[Exception] = None,
        html_error: Optional[Exception] = None,
    ):
        self.artwork_id = artwork_id
        self.api_error = api_error
        self.html_error = html_error
        causes = "; ".join(str(e) for e in (api_error, html_error) if e is not None)
        message = f"Could not resolve artwork {artwork_id!r}"
        if causes:
            message = f"{message}: {causes}"
        super().__init__(message)
