import json
from collections.abc import Callable

import httpx
import pytest

from medihelp.chat.http_client_adapter import HttpChatClientAdapter
from medihelp.chat.session import ConversationSession
from medihelp.config.settings import Settings
from medihelp.extraction.extractor import ReportExtractor
from medihelp.extraction.http_client_adapter import HttpExtractionClientAdapter
from medihelp.page import MediHelpPage, build_page
from medihelp.report.notifications import CollectingNotifier

BASE_URL = "http://medihelp.test"


class FakeMediHelpServer:
    """In-process stand-in for the web app's two API routes."""

    def __init__(self) -> None:
        self.extraction_status = 200
        self.extraction_text = "##Summary\n\n**Cholesterol** is high."
        self.chat_status = 200
        self.chat_parts = ['0:"That "', '0:"looks fine."', 'd:{"finishReason":"stop"}']
        self.requests: list[httpx.Request] = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/api/listgeminireport":
            return httpx.Response(self.extraction_status, text=self.extraction_text)
        if request.url.path == "/api/resumechat":
            body = "\n".join(self.chat_parts) + "\n"
            return httpx.Response(self.chat_status, text=body)
        return httpx.Response(404)

    def bodies(self, path: str) -> list[dict[str, object]]:
        return [json.loads(r.content) for r in self.requests if r.url.path == path]


@pytest.fixture()
def server() -> FakeMediHelpServer:
    return FakeMediHelpServer()


@pytest.fixture()
def page_factory(server: FakeMediHelpServer) -> Callable[[], MediHelpPage]:
    def _make() -> MediHelpPage:
        transport = httpx.MockTransport(server.handle)
        extractor = ReportExtractor(
            HttpExtractionClientAdapter(base_url=BASE_URL, transport=transport)
        )
        session = ConversationSession(
            HttpChatClientAdapter(base_url=BASE_URL, transport=transport)
        )
        return build_page(
            Settings(api_base_url=BASE_URL),
            notifier=CollectingNotifier(),
            extractor=extractor,
            session=session,
        )

    return _make
