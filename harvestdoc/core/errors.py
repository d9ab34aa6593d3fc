"""
Error kinds raised while fetching and exporting a concept catalog.

Nothing here is retried. Errors propagate to the CLI (exit status) or the
HTTP service (response status) which map them at the edge.
"""


class HarvestDocError(Exception):
    """Base class for all harvestdoc errors."""

    pass


class SourceError(HarvestDocError):
    """Raised when a catalog source cannot produce concepts."""

    pass


class TransportError(SourceError):
    """Raised when the remote API cannot be reached or times out."""

    pass


class UnexpectedStatusError(SourceError):
    """Raised when the remote API answers with a non-200 status."""

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        self.status = f"{status_code} {reason}".strip()
        super().__init__(f"client: {self.status}")


class DecodeError(SourceError):
    """Raised when a payload is not a JSON array of concepts."""

    pass


class CatalogIOError(SourceError):
    """Raised when a local catalog file cannot be opened or read."""

    pass


class EncodeError(HarvestDocError):
    """Raised when concepts cannot be exported."""

    pass


class WriteError(EncodeError):
    """Raised when the output sink rejects a write."""

    pass
