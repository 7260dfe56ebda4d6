from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class SessionState(str, Enum):
    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting-response"


@dataclass
class Message:
    """One transcript entry. Assistant messages grow while streaming."""

    role: Role
    content: str
    complete: bool = True

    def to_wire(self) -> dict[str, str]:
        return {"role": self.role.value, "content": self.content}
