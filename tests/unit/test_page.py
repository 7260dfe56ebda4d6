import asyncio
from unittest.mock import patch

from medihelp.chat.example_client_adapter import ExampleChatClientAdapter
from medihelp.config.settings import Settings
from medihelp.page import NO_REPORT_BADGE, REPORT_ADDED_BADGE, build_page
from medihelp.report.notifications import CollectingNotifier


def _example_settings() -> Settings:
    return Settings(extraction_provider="example", chat_provider="example")


class TestBuildPage:
    def test_wires_example_adapters(self) -> None:
        page = build_page(_example_settings())
        assert isinstance(page.session._client, ExampleChatClientAdapter)
        assert isinstance(page.notifier, CollectingNotifier)

    def test_uses_configured_jpeg_quality(self) -> None:
        settings = Settings(
            extraction_provider="example", chat_provider="example", image_jpeg_quality=25
        )
        with patch("medihelp.page.PillowJpegCompressor") as mock_compressor:
            build_page(settings)
        mock_compressor.assert_called_once_with(quality=25)

    def test_confirmation_reaches_session(self) -> None:
        page = build_page(_example_settings())
        page.panel.edit("BP: 120/80")
        page.panel.finalize()
        assert page.session.report_data == "BP: 120/80"

    def test_reconfirmation_replaces_context(self) -> None:
        page = build_page(_example_settings())
        page.holder.confirm("old")
        page.holder.confirm("new")
        assert page.session.report_data == "new"


class TestReportBadge:
    def test_no_report(self) -> None:
        page = build_page(_example_settings())
        assert page.report_badge() == NO_REPORT_BADGE

    def test_report_added(self) -> None:
        page = build_page(_example_settings())
        page.holder.confirm("text")
        assert page.report_badge() == REPORT_ADDED_BADGE

    def test_empty_confirmation_shows_no_report(self) -> None:
        page = build_page(_example_settings())
        page.holder.confirm("")
        assert page.report_badge() == NO_REPORT_BADGE


class TestExampleFlow:
    def test_extract_confirm_and_chat(self, jpeg_bytes: bytes) -> None:
        page = build_page(_example_settings())

        async def scenario() -> str:
            await page.panel.select_document(jpeg_bytes, "image/jpeg", name="lab.jpg")
            await page.panel.extract()
            page.panel.finalize()
            reply = await page.session.submit("What stands out?")
            return reply.content

        reply = asyncio.run(scenario())
        assert "Cholesterol is above the reference range." in page.holder.report_data
        assert "your confirmed report" in reply
