class ChatError(Exception):
    """Base exception for conversational session errors."""


class EmptyInputError(ChatError):
    """Raised when an empty message is submitted."""


class SessionBusyError(ChatError):
    """Raised when a message is submitted while a reply is still streaming."""


class ChatRequestFailedError(ChatError):
    """Raised when the chat request or its response stream fails."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
