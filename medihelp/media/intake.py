"""Holds the pending payload for the next extraction request."""

import asyncio
import itertools

from medihelp.logging.logger import Log
from medihelp.media.encoder import Base64Encoder
from medihelp.media.models import EncodedPayload, Picker
from medihelp.media.normalizer import MediaNormalizer


class FileIntake:
    """Validate -> normalize -> encode -> store, where the newest selection wins.

    Every accepted selection draws a sequence number when it is issued. When
    its encoding completes, the result is stored only if no newer selection
    has been issued in the meantime.
    """

    def __init__(self, normalizer: MediaNormalizer, encoder: Base64Encoder) -> None:
        self._normalizer = normalizer
        self._encoder = encoder
        self._sequence = itertools.count(1)
        self._latest_issued = 0
        self._payload: EncodedPayload | None = None

    @property
    def payload(self) -> EncodedPayload | None:
        return self._payload

    def clear(self) -> None:
        self._payload = None

    async def select(
        self,
        data: bytes,
        mime_type: str,
        picker: Picker,
        name: str = "",
    ) -> bool:
        """Process one selection.

        Returns:
            True if the resulting payload was stored, False if a newer
            selection superseded it.

        Raises:
            UnsupportedFileTypeError: before any sequence number is drawn.
            ImageCompressionError: if an image cannot be recompressed.
        """
        file = self._normalizer.validate(data, mime_type, picker, name=name)
        seq = next(self._sequence)
        self._latest_issued = seq
        Log.info(f"Selection #{seq}: {name or 'unnamed'} ({mime_type}, {len(data)} bytes)")

        normalized = await asyncio.to_thread(self._normalizer.normalize, file)
        payload = await self._encoder.encode(normalized)

        if seq != self._latest_issued:
            Log.debug(f"Discarding stale selection #{seq}; newest is #{self._latest_issued}")
            return False
        self._payload = payload
        return True
