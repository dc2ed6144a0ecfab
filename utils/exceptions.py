"""
Custom exceptions for the Brand Balance Engine
"""


class BrandEngineError(Exception):
    """Base class for errors raised by the engine."""


class LoadError(BrandEngineError):
    """
    Raised when an image resource cannot be fetched or decoded.

    Analysis callers are expected to fall back to default display settings.
    """

    def __init__(self, url: str, reason: str = None):
        self.url = url
        self.reason = reason or "unknown error"
        self.message = f"Failed to load image {_shorten(url)}: {self.reason}"
        super().__init__(self.message)


class AccessError(LoadError):
    """
    Raised when pixel access is blocked (HTTP 401/403, unreadable file).
    """


def _shorten(url: str, limit: int = 60) -> str:
    # data URIs can be megabytes long
    if url and len(url) > limit:
        return url[:limit] + "..."
    return url
