"""Offline extraction client.

Returns a canned report so the pipeline can run without the web app.
"""

from typing import ClassVar

from medihelp.extraction.client_base import BaseExtractionClient


class ExampleExtractionClientAdapter(BaseExtractionClient):
    """Example adapter that returns a fixed report in the endpoint's raw format."""

    DEFAULT_RESPONSE: ClassVar[str] = (
        "## Report Summary\\n\\n"
        "**Patient:** PERSON_1\\n"
        "**Total cholesterol:** 242 mg/dL (reference < 200)\\n"
        "**Blood pressure:** 128/82 mmHg\\n\\n"
        "## Notes\\n"
        "Cholesterol is above the reference range."
    )

    def __init__(self, response: str | None = None) -> None:
        self._response = self.DEFAULT_RESPONSE if response is None else response

    async def request_report(self, data_url: str) -> str:
        _ = data_url
        return self._response
