from abc import ABC, abstractmethod
from collections.abc import AsyncIterator


class BaseChatClient(ABC):
    """Contract for streaming chat clients."""

    @abstractmethod
    def stream_reply(
        self,
        *,
        messages: list[dict[str, str]],
        report_data: str,
    ) -> AsyncIterator[str]:
        """Yield assistant text chunks for the given transcript.

        Args:
            messages: Full transcript as `{"role", "content"}` dicts.
            report_data: Confirmed report text sent as side-channel context.

        Raises:
            ChatRequestFailedError: on HTTP, transport or stream errors.
        """
