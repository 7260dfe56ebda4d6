import asyncio
import base64

from medihelp.media.models import EncodedPayload, UploadedFile


def to_data_url(data: bytes, mime_type: str) -> str:
    """Encode bytes as a `data:<mime>;base64,<body>` string."""
    body = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{body}"


class Base64Encoder:
    """Produces data-URL payloads off the event loop."""

    async def encode(self, file: UploadedFile) -> EncodedPayload:
        data_url = await asyncio.to_thread(to_data_url, file.data, file.mime_type)
        return EncodedPayload(data_url=data_url)
