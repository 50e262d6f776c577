from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ProxyError(Exception):
    """Base error carrying the HTTP status and classification for a response."""

    status_code: int
    message: str
    error_type: str = "unknown_error"

    def __str__(self) -> str:
        return self.message


class ConfigurationError(ProxyError):
    def __init__(self, message: str) -> None:
        super().__init__(
            status_code=500,
            message=message,
            error_type="configuration_error",
        )


class ValidationError(ProxyError):
    def __init__(self, message: str) -> None:
        super().__init__(
            status_code=400,
            message=message,
            error_type="invalid_request_error",
        )


class UpstreamError(ProxyError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(
            status_code=status_code or 500,
            message=message,
        )


class ParsingError(ProxyError):
    def __init__(self, message: str) -> None:
        super().__init__(status_code=500, message=message)


class TransportError(ProxyError):
    def __init__(self, message: str) -> None:
        super().__init__(status_code=500, message=message)
