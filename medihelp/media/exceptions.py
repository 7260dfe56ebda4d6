class MediaError(Exception):
    """Base exception for media intake errors."""


class UnsupportedFileTypeError(MediaError):
    """Raised when a file's MIME type is not in the picker's allow-list."""

    def __init__(self, mime_type: str, picker: str) -> None:
        super().__init__(f"MIME type '{mime_type}' is not supported by the {picker} picker")
        self.mime_type = mime_type
        self.picker = picker


class ImageCompressionError(MediaError):
    """Raised when image bytes cannot be decoded or re-encoded."""
