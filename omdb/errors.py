from typing import Optional


class OmdbError(RuntimeError):
    """Base class for every error raised by the OMDb client."""


class ConfigurationError(OmdbError):
    pass


class ValidationError(OmdbError):
    """Caller input rejected before any request was sent."""


class TransportError(OmdbError):
    pass


class UnexpectedStatusError(OmdbError):
    def __init__(self, status_code: int, *, body_snippet: Optional[str] = None) -> None:
        super().__init__(f"OMDb request failed with HTTP {status_code}.")
        self.status_code = status_code
        self.body_snippet = body_snippet


class DecodeError(OmdbError):
    pass


class APIError(OmdbError):
    """The service answered but reported a failure via `Response: "False"`."""

    def __init__(self, message: Optional[str]) -> None:
        super().__init__(f"Error from OMDb API: {message}")
        self.message = message


class UnknownResultKindError(OmdbError):
    def __init__(self, kind: Optional[str]) -> None:
        super().__init__(f"Unrecognised OMDb result type: {kind!r}")
        self.kind = kind
