"""Error taxonomy shared by the services and the API layer.

Services raise these; ``main.py`` turns them into JSON responses. Normalization
never raises: unknown type/status strings fall back to a best-effort label.
"""


class AssetTrackError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AssetTrackError):
    """Missing or invalid required field(s)."""

    status_code = 422


class ExternalStoreError(AssetTrackError):
    """A device store operation failed."""

    status_code = 502


class ParseError(AssetTrackError):
    """An uploaded file could not be read; aborts the whole import."""

    status_code = 400


class NotFoundError(AssetTrackError):
    status_code = 404
