class ExtractionError(Exception):
    """Raised when report extraction fails."""


class MissingInputError(ExtractionError):
    """Raised when extraction is requested without an encoded payload."""


class ExtractionFailedError(ExtractionError):
    """Raised when the extraction endpoint does not return a report."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ExtractionNetworkError(ExtractionFailedError):
    """Raised when the extraction request fails due to network/infrastructure issues."""
