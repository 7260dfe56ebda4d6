from abc import ABC, abstractmethod


class BaseExtractionClient(ABC):
    """Contract for clients of the report extraction endpoint."""

    @abstractmethod
    async def request_report(self, data_url: str) -> str:
        """Send a data-URL payload and return the raw response text.

        Raises:
            ExtractionFailedError: on a non-success response.
            ExtractionNetworkError: on transport failures.
        """
