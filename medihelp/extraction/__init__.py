from medihelp.extraction.extractor import ReportExtractor
from medihelp.extraction.factory import ExtractorFactory
from medihelp.extraction.text_cleanup import clean_report_text

__all__ = ["ExtractorFactory", "ReportExtractor", "clean_report_text"]
