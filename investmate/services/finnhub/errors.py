"""Typed market-data errors carrying the HTTP status a caller should return."""


class MarketDataError(Exception):
    """Base error for every gateway failure.

    Callers catch this one type and respond with ``status_code`` and
    ``message``; anything else is an unexpected 500.
    """

    kind = "MarketDataError"
    default_status = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code if status_code is not None else self.default_status

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code})"


class InvalidInputError(MarketDataError):
    kind = "InvalidInput"
    default_status = 400


class ConfigurationMissingError(MarketDataError):
    kind = "ConfigurationMissing"
    default_status = 500


class UpstreamError(MarketDataError):
    kind = "UpstreamError"
    default_status = 502


class NotFoundError(MarketDataError):
    kind = "NotFound"
    default_status = 404
