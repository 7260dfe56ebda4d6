"""Offline chat client that streams a canned answer word by word."""

from collections.abc import AsyncIterator

from medihelp.chat.client_base import BaseChatClient


class ExampleChatClientAdapter(BaseChatClient):
    """Example adapter; mentions whether report context was supplied."""

    def __init__(self, reply: str | None = None) -> None:
        self._reply = reply

    async def stream_reply(
        self,
        *,
        messages: list[dict[str, str]],
        report_data: str,
    ) -> AsyncIterator[str]:
        reply = self._reply
        if reply is None:
            question = messages[-1]["content"] if messages else ""
            context = "your confirmed report" if report_data else "no report"
            reply = f"Based on {context}, here is some general guidance about: {question}"
        words = reply.split(" ")
        for index, word in enumerate(words):
            yield word if index == len(words) - 1 else f"{word} "
