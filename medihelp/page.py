from medihelp.chat.factory import ChatClientFactory
from medihelp.chat.session import ConversationSession
from medihelp.config.settings import Settings
from medihelp.extraction.extractor import ReportExtractor
from medihelp.extraction.factory import ExtractorFactory
from medihelp.media.encoder import Base64Encoder
from medihelp.media.intake import FileIntake
from medihelp.media.normalizer import MediaNormalizer
from medihelp.media.pillow_compressor import PillowJpegCompressor
from medihelp.report.notifications import BaseNotifier, CollectingNotifier
from medihelp.report.panel import ReportPanel
from medihelp.report.state_holder import ReportStateHolder

REPORT_ADDED_BADGE = "✓ Report Added"
NO_REPORT_BADGE = "No Report or Speech Added"


class MediHelpPage:
    """Top-level coordinator: owns the confirmed report and wires it to chat."""

    def __init__(
        self,
        *,
        holder: ReportStateHolder,
        panel: ReportPanel,
        session: ConversationSession,
        notifier: BaseNotifier,
    ) -> None:
        self.holder = holder
        self.panel = panel
        self.session = session
        self.notifier = notifier
        holder.subscribe(session.set_report_data)

    def report_badge(self) -> str:
        return REPORT_ADDED_BADGE if self.holder.report_data else NO_REPORT_BADGE


def build_page(
    settings: Settings,
    notifier: BaseNotifier | None = None,
    extractor: ReportExtractor | None = None,
    session: ConversationSession | None = None,
) -> MediHelpPage:
    """Build a page with all adapters selected from settings."""
    notifier = notifier if notifier is not None else CollectingNotifier()
    holder = ReportStateHolder()
    intake = FileIntake(
        normalizer=MediaNormalizer(PillowJpegCompressor(quality=settings.image_jpeg_quality)),
        encoder=Base64Encoder(),
    )
    panel = ReportPanel(
        intake=intake,
        extractor=extractor if extractor is not None else ExtractorFactory.create(settings),
        holder=holder,
        notifier=notifier,
    )
    if session is None:
        session = ConversationSession(ChatClientFactory.create(settings))
    return MediHelpPage(holder=holder, panel=panel, session=session, notifier=notifier)
