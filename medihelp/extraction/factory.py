from medihelp.config.settings import Settings
from medihelp.extraction.example_client_adapter import ExampleExtractionClientAdapter
from medihelp.extraction.extractor import ReportExtractor
from medihelp.extraction.http_client_adapter import HttpExtractionClientAdapter


class ExtractorFactory:
    """Creates the configured report extractor."""

    @classmethod
    def create(cls, settings: Settings) -> ReportExtractor:
        provider = settings.extraction_provider.lower()
        if provider == "example":
            return ReportExtractor(ExampleExtractionClientAdapter())
        if provider == "http":
            return ReportExtractor(
                HttpExtractionClientAdapter(
                    base_url=settings.api_base_url,
                    path=settings.extraction_path,
                    timeout_seconds=settings.request_timeout_seconds,
                )
            )
        raise ValueError(
            f"Unknown extraction provider '{provider}'. Choose from: ['example', 'http']"
        )
