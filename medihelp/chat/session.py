"""Append-only chat transcript with one streaming request at a time."""

from collections.abc import Callable

from medihelp.chat.client_base import BaseChatClient
from medihelp.chat.exceptions import EmptyInputError, SessionBusyError
from medihelp.chat.models import Message, Role, SessionState
from medihelp.logging.logger import Log

UpdateListener = Callable[["ConversationSession"], None]


class ConversationSession:
    """Chat state machine: IDLE -> AWAITING_RESPONSE -> IDLE.

    The confirmed report is pushed in through `set_report_data` and sent as
    context with every request, together with the whole transcript.
    """

    def __init__(self, client: BaseChatClient, report_data: str = "") -> None:
        self._client = client
        self._messages: list[Message] = []
        self._listeners: list[UpdateListener] = []
        self.report_data = report_data
        self.state = SessionState.IDLE
        self.last_error: str | None = None

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def is_loading(self) -> bool:
        return self.state is SessionState.AWAITING_RESPONSE

    def set_report_data(self, text: str) -> None:
        self.report_data = text
        self._changed()

    def on_update(self, listener: UpdateListener) -> None:
        self._listeners.append(listener)

    async def submit(self, text: str) -> Message:
        """Send a user message and stream the assistant reply.

        Returns:
            The completed assistant message.

        Raises:
            EmptyInputError: for empty input; nothing changes.
            SessionBusyError: while a reply is streaming; nothing changes.
            ChatRequestFailedError: if the request fails. The session is back
                in IDLE and `last_error` is set. Any other error from the
                client is re-raised the same way.
        """
        if not text:
            raise EmptyInputError("Message is empty")
        if self.is_loading:
            raise SessionBusyError("A reply is still streaming")

        self._messages.append(Message(role=Role.USER, content=text))
        self.state = SessionState.AWAITING_RESPONSE
        self.last_error = None
        self._changed()

        wire = [message.to_wire() for message in self._messages]
        Log.info(
            f"Sending {len(wire)} messages, "
            f"report context {len(self.report_data)} chars"
        )

        reply: Message | None = None
        try:
            async for chunk in self._client.stream_reply(
                messages=wire,
                report_data=self.report_data,
            ):
                if reply is None:
                    reply = Message(role=Role.ASSISTANT, content="", complete=False)
                    self._messages.append(reply)
                reply.content += chunk
                self._changed()
        except Exception as exc:
            Log.error(f"Chat request failed: {exc}")
            self.last_error = str(exc)
            raise
        finally:
            if self.state is SessionState.AWAITING_RESPONSE and (
                reply is None or not reply.complete
            ):
                self.state = SessionState.IDLE
                self._changed()

        if reply is None:
            reply = Message(role=Role.ASSISTANT, content="", complete=False)
            self._messages.append(reply)
        reply.complete = True
        Log.info(f"Chat reply complete ({len(reply.content)} chars)")
        self._changed()
        return reply

    def _changed(self) -> None:
        for listener in self._listeners:
            listener(self)
