"""Error types raised by aliddns components."""


class DDNSError(Exception):
    """Base class for all aliddns errors."""


class ResolutionError(DDNSError):
    """The public address could not be discovered or failed validation."""


class ProviderError(DDNSError):
    """A DNS provider call failed.

    Args:
        message: Human readable description
        code: Error code reported by the provider, if any
    """

    def __init__(self, message: str, code: str | None = None):
        self.code = code
        if code:
            message = f"{message} Code: {code}"
        super().__init__(message)


class RecordLookupError(ProviderError, LookupError):
    """The record query failed or the provider's answer was ambiguous."""


class UpdateError(ProviderError):
    """Creating or updating a record failed."""


class TransportError(ProviderError):
    """The HTTP request to the provider never completed."""
