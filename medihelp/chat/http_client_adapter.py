from collections.abc import AsyncIterator

import httpx

from medihelp.chat.client_base import BaseChatClient
from medihelp.chat.exceptions import ChatRequestFailedError
from medihelp.chat.stream_protocol import parse_line, text_delta
from medihelp.logging.logger import Log


class HttpChatClientAdapter(BaseChatClient):
    """Streams replies from the chat route over HTTP."""

    PROTOCOLS = ("data", "text")

    def __init__(
        self,
        *,
        base_url: str,
        path: str = "/api/resumechat",
        stream_protocol: str = "data",
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if stream_protocol not in self.PROTOCOLS:
            raise ValueError(
                f"Unknown chat stream protocol '{stream_protocol}'. "
                f"Choose from: {list(self.PROTOCOLS)}"
            )
        self._base_url = base_url
        self._path = path
        self._stream_protocol = stream_protocol
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    async def stream_reply(
        self,
        *,
        messages: list[dict[str, str]],
        report_data: str,
    ) -> AsyncIterator[str]:
        body = {"messages": messages, "data": {"reportData": report_data}}
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                async with client.stream("POST", self._path, json=body) as response:
                    if not response.is_success:
                        await response.aread()
                        Log.debug(f"Chat error body: {response.text[:500]}")
                        raise ChatRequestFailedError(
                            f"Chat endpoint returned HTTP {response.status_code}",
                            status_code=response.status_code,
                        )
                    if self._stream_protocol == "text":
                        async for chunk in response.aiter_text():
                            if chunk:
                                yield chunk
                    else:
                        async for line in response.aiter_lines():
                            part = parse_line(line)
                            if part is None:
                                continue
                            delta = text_delta(part)
                            if delta:
                                yield delta
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ChatRequestFailedError(f"Chat request failed: {exc}") from exc
