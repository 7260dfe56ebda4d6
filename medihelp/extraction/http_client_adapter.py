import httpx

from medihelp.extraction.client_base import BaseExtractionClient
from medihelp.extraction.exceptions import ExtractionFailedError, ExtractionNetworkError


class HttpExtractionClientAdapter(BaseExtractionClient):
    """Posts `{"base64": <data-URL>}` to the extraction route."""

    def __init__(
        self,
        *,
        base_url: str,
        path: str = "/api/listgeminireport",
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._path = path
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    async def request_report(self, data_url: str) -> str:
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.post(self._path, json={"base64": data_url})
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ExtractionNetworkError(f"Extraction request failed: {exc}") from exc

        if not response.is_success:
            raise ExtractionFailedError(
                f"Extraction endpoint returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response.text
