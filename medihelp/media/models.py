import base64
import binascii
from dataclasses import dataclass
from enum import Enum


class Modality(str, Enum):
    """Category of an uploaded input."""

    DOCUMENT = "document"
    IMAGE = "image"
    AUDIO = "audio"


class Picker(str, Enum):
    """File picker the user selected from."""

    DOCUMENT = "document"  # documents and images
    SPEECH = "speech"


@dataclass(frozen=True)
class UploadedFile:
    """A user-selected file before encoding."""

    data: bytes
    mime_type: str
    modality: Modality
    name: str = ""

    @property
    def size_bytes(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class EncodedPayload:
    """Data-URL transport form of an uploaded file."""

    data_url: str

    @property
    def mime_type(self) -> str:
        header, _, _ = self.data_url.partition(",")
        return header.removeprefix("data:").split(";", 1)[0]

    def decode(self) -> bytes:
        """Return the bytes carried in the base64 body.

        Raises:
            ValueError: if the data URL is malformed.
        """
        header, sep, body = self.data_url.partition(",")
        if not sep or not header.startswith("data:") or not header.endswith(";base64"):
            raise ValueError("Not a base64 data URL")
        try:
            return base64.b64decode(body, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"Invalid base64 body: {exc}") from exc

    def __bool__(self) -> bool:
        return bool(self.data_url)
