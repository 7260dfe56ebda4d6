"""Console front end for the MediHelp pipeline."""

import asyncio
import mimetypes
import sys
from pathlib import Path

from medihelp.chat.exceptions import ChatError
from medihelp.chat.models import Role
from medihelp.chat.session import ConversationSession
from medihelp.config.settings import Settings
from medihelp.logging.logger import Log
from medihelp.media.models import Picker
from medihelp.page import MediHelpPage, build_page
from medihelp.report.notifications import BaseNotifier, Notification

HELP = """Commands:
  /doc <path>     select a report (JPEG, PNG, WEBP, PDF)
  /speech <path>  select a recording (MP3, WAV, OGG, WEBM)
  /extract        upload the selected file
  /edit           replace the report text (end with a line containing '.')
  /confirm        finalize the report for the chat
  /status         show report and chat state
  /quit           exit
Anything else is sent to the assistant."""


class ConsoleNotifier(BaseNotifier):
    def notify(self, notification: Notification) -> None:
        prefix = "!" if notification.variant == "destructive" else "*"
        print(f"{prefix} {notification.description}")


class StreamPrinter:
    """Prints assistant text as it arrives."""

    def __init__(self) -> None:
        self._printed = 0
        self._message_count = 0

    def __call__(self, session: ConversationSession) -> None:
        messages = session.messages
        if not messages or messages[-1].role is not Role.ASSISTANT:
            return
        if len(messages) != self._message_count:
            self._message_count = len(messages)
            self._printed = 0
            sys.stdout.write("assistant> ")
        last = messages[-1]
        sys.stdout.write(last.content[self._printed:])
        self._printed = len(last.content)
        if last.complete:
            sys.stdout.write("\n")
        sys.stdout.flush()


async def _read(prompt: str) -> str:
    return await asyncio.to_thread(input, prompt)


async def _select(page: MediHelpPage, picker: Picker, raw_path: str) -> None:
    path = Path(raw_path.strip()).expanduser()
    if not path.is_file():
        print(f"! No such file: {path}")
        return
    mime_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    page.panel.switch_tab(picker)
    data = await asyncio.to_thread(path.read_bytes)
    if picker is Picker.SPEECH:
        stored = await page.panel.select_speech(data, mime_type, name=path.name)
    else:
        stored = await page.panel.select_document(data, mime_type, name=path.name)
    if stored:
        print(f"* {path.name} ready to upload")


async def _edit(page: MediHelpPage) -> None:
    lines: list[str] = []
    while (line := await _read("")) != ".":
        lines.append(line)
    page.panel.edit("\n".join(lines))


async def run(page: MediHelpPage) -> None:
    print(HELP)
    page.session.on_update(StreamPrinter())
    while True:
        line = (await _read("you> ")).strip()
        if not line:
            continue
        command, _, arg = line.partition(" ")
        if command == "/quit":
            return
        if command == "/doc":
            await _select(page, Picker.DOCUMENT, arg)
        elif command == "/speech":
            await _select(page, Picker.SPEECH, arg)
        elif command == "/extract":
            print("extracting...")
            if await page.panel.extract():
                print(page.panel.report_text)
        elif command == "/edit":
            await _edit(page)
        elif command == "/confirm":
            page.panel.finalize()
            print(f"* {page.report_badge()}")
        elif command == "/status":
            print(f"report: {page.report_badge()} | panel: {page.panel.status.value}"
                  f" | chat: {page.session.state.value}")
        else:
            try:
                await page.session.submit(line)
            except ChatError as exc:
                print(f"! {exc}")


def main() -> None:
    """Entry point: settings -> logging -> page -> console loop."""
    settings = Settings()
    Log.configure(settings.log_level)
    page = build_page(settings, notifier=ConsoleNotifier())
    try:
        asyncio.run(run(page))
    except (KeyboardInterrupt, EOFError):
        Log.info("MediHelp console closed")


if __name__ == "__main__":
    main()
