"""Upload -> extract -> edit -> finalize flow for one report."""

from enum import Enum

from medihelp.extraction.exceptions import ExtractionFailedError, MissingInputError
from medihelp.extraction.extractor import ReportExtractor
from medihelp.logging.logger import Log
from medihelp.media.exceptions import ImageCompressionError, UnsupportedFileTypeError
from medihelp.media.intake import FileIntake
from medihelp.media.models import Picker
from medihelp.report.notifications import BaseNotifier, Notification
from medihelp.report.state_holder import ReportStateHolder

UNSUPPORTED_DOCUMENT_MESSAGE = "Filetype not supported!"
UNSUPPORTED_AUDIO_MESSAGE = (
    "Audio filetype not supported! Please use MP3, WAV, or OGG format."
)
UNREADABLE_IMAGE_MESSAGE = "Could not read the selected image!"
EXTRACTION_FAILED_MESSAGE = "Extraction failed. Please try again."


class PanelStatus(str, Enum):
    IDLE = "idle"
    EXTRACTING = "extracting"
    READY = "ready"
    FAILED = "failed"


class ReportPanel:
    """Coordinates file intake, extraction and report confirmation.

    Validation and network errors are caught here and turned into
    notifications plus an observable `status`.
    """

    def __init__(
        self,
        *,
        intake: FileIntake,
        extractor: ReportExtractor,
        holder: ReportStateHolder,
        notifier: BaseNotifier,
    ) -> None:
        self._intake = intake
        self._extractor = extractor
        self._holder = holder
        self._notifier = notifier
        self.active_tab = Picker.DOCUMENT
        self.report_text = ""
        self.status = PanelStatus.IDLE
        self.last_error: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.status is PanelStatus.EXTRACTING

    def switch_tab(self, picker: Picker) -> None:
        self.active_tab = picker

    async def select_document(self, data: bytes, mime_type: str, name: str = "") -> bool:
        return await self._select(data, mime_type, Picker.DOCUMENT, name)

    async def select_speech(self, data: bytes, mime_type: str, name: str = "") -> bool:
        return await self._select(data, mime_type, Picker.SPEECH, name)

    async def _select(self, data: bytes, mime_type: str, picker: Picker, name: str) -> bool:
        try:
            return await self._intake.select(data, mime_type, picker, name=name)
        except UnsupportedFileTypeError as exc:
            Log.warning(f"Rejected selection: {exc}")
            message = (
                UNSUPPORTED_AUDIO_MESSAGE if picker is Picker.SPEECH
                else UNSUPPORTED_DOCUMENT_MESSAGE
            )
            self._error(message)
            return False
        except ImageCompressionError as exc:
            Log.warning(f"Rejected selection: {exc}")
            self._error(UNREADABLE_IMAGE_MESSAGE)
            return False

    async def extract(self) -> bool:
        """Run extraction for the pending payload.

        On success the cleaned text replaces `report_text`; on failure the
        draft is left as it was and `status` becomes FAILED.
        """
        if self.is_loading:
            Log.warning("Extraction already in progress")
            return False
        self.status = PanelStatus.EXTRACTING
        self.last_error = None
        try:
            report = await self._extractor.extract(self._intake.payload)
        except MissingInputError:
            self.status = PanelStatus.IDLE
            kind = "report" if self.active_tab is Picker.DOCUMENT else "speech file"
            self._error(f"Upload a valid {kind}!")
            return False
        except ExtractionFailedError as exc:
            Log.error(f"Extraction failed: {exc}")
            self.status = PanelStatus.FAILED
            self.last_error = str(exc)
            self._error(EXTRACTION_FAILED_MESSAGE)
            return False
        except Exception as exc:
            Log.error(f"Extraction aborted: {exc}")
            self.status = PanelStatus.FAILED
            self.last_error = str(exc)
            self._error(EXTRACTION_FAILED_MESSAGE)
            raise
        else:
            self.report_text = report
            self.status = PanelStatus.READY
            return True
        finally:
            if self.status is PanelStatus.EXTRACTING:
                self.status = PanelStatus.IDLE

    def edit(self, text: str) -> None:
        self.report_text = text

    def finalize(self) -> None:
        """Hand the current draft to the holder as the confirmed report."""
        self._holder.confirm(self.report_text)

    def _error(self, description: str) -> None:
        self._notifier.notify(Notification(description=description, variant="destructive"))
