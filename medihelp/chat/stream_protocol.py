"""Parser for the line-oriented chat data stream.

Each line is `<code>:<json>`. Only a few part codes matter to the session:

    0  text delta (JSON string)
    3  error (JSON string)
    d  finish message
    e  finish step

Other codes (data, annotations, tool calls, reasoning) are ignored.
"""

import json
from dataclasses import dataclass
from typing import Any

from medihelp.chat.exceptions import ChatRequestFailedError

TEXT_PART = "0"
ERROR_PART = "3"
FINISH_MESSAGE_PART = "d"
FINISH_STEP_PART = "e"


@dataclass(frozen=True)
class StreamPart:
    code: str
    value: Any


def parse_line(line: str) -> StreamPart | None:
    """Parse one stream line; blank lines yield None.

    Raises:
        ChatRequestFailedError: if the line is not a valid stream part.
    """
    line = line.strip()
    if not line:
        return None
    code, sep, body = line.partition(":")
    if not sep or not code:
        raise ChatRequestFailedError(f"Malformed stream line: {line[:80]!r}")
    try:
        value = json.loads(body)
    except json.JSONDecodeError as exc:
        raise ChatRequestFailedError(f"Malformed stream part {code!r}: {exc}") from exc
    return StreamPart(code=code, value=value)


def text_delta(part: StreamPart) -> str | None:
    """Return the text carried by a part, raising on error parts."""
    if part.code == ERROR_PART:
        raise ChatRequestFailedError(f"Chat stream error: {part.value}")
    if part.code == TEXT_PART:
        if not isinstance(part.value, str):
            raise ChatRequestFailedError("Text part must carry a string")
        return part.value
    return None
