"""Report extraction: payload in, cleaned plain-text report out."""

from medihelp.extraction.client_base import BaseExtractionClient
from medihelp.extraction.exceptions import MissingInputError
from medihelp.extraction.text_cleanup import clean_report_text
from medihelp.logging.logger import Log
from medihelp.media.models import EncodedPayload


class ReportExtractor:
    """Sends an encoded file to the extraction endpoint and cleans the reply."""

    def __init__(self, client: BaseExtractionClient) -> None:
        self._client = client

    async def extract(self, payload: EncodedPayload | None) -> str:
        """Return the cleaned report text for a payload.

        Raises:
            MissingInputError: if the payload is absent or empty. No request is sent.
            ExtractionFailedError: if the endpoint does not return a report.
        """
        if payload is None or not payload:
            raise MissingInputError("No encoded file to extract from")

        Log.info(
            f"Requesting extraction for {payload.mime_type} payload "
            f"({len(payload.data_url)} chars)"
        )
        raw = await self._client.request_report(payload.data_url)
        Log.debug(f"Extraction raw response:\n{raw}")

        report = clean_report_text(raw)
        Log.info(f"Extraction complete: {len(report)} chars")
        return report
