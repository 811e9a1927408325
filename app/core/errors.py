"""
Error taxonomy.

FetchError and its subclasses are RECOVERABLE read-path failures: the
caller substitutes a fallback (heuristic scoring, placeholder data) and
logs the cause. They never reach the HTTP client.

RecordValidationError and RecordNotFoundError belong to the write path
and are surfaced to the caller with a descriptive reason.
"""


class FetchError(Exception):
    """Base class for failures that trigger a fallback."""


class UpstreamServiceError(FetchError):
    """Ranking service unreachable, timed out, or returned a non-2xx status."""


class ResponseParseError(FetchError):
    """Ranking service answered, but not with the expected JSON shape."""


class StoreUnavailableError(FetchError):
    """Document store query failed."""


class RecordValidationError(Exception):
    """A write was rejected before reaching the store."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class RecordNotFoundError(Exception):
    """An update/delete targeted a record that does not exist."""

    def __init__(self, collection: str, record_id: str):
        super().__init__(f"{collection} record '{record_id}' not found")
        self.collection = collection
        self.record_id = record_id
