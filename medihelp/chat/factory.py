from medihelp.chat.client_base import BaseChatClient
from medihelp.chat.example_client_adapter import ExampleChatClientAdapter
from medihelp.chat.http_client_adapter import HttpChatClientAdapter
from medihelp.config.settings import Settings


class ChatClientFactory:
    """Creates the configured chat client."""

    @classmethod
    def create(cls, settings: Settings) -> BaseChatClient:
        provider = settings.chat_provider.lower()
        if provider == "example":
            return ExampleChatClientAdapter()
        if provider == "http":
            return HttpChatClientAdapter(
                base_url=settings.api_base_url,
                path=settings.chat_path,
                stream_protocol=settings.chat_stream_protocol.lower(),
                timeout_seconds=settings.request_timeout_seconds,
            )
        raise ValueError(
            f"Unknown chat provider '{provider}'. Choose from: ['example', 'http']"
        )
