"""MIME validation and image recompression for user-selected files."""

from dataclasses import replace

from medihelp.logging.logger import Log
from medihelp.media.base import BaseImageCompressor
from medihelp.media.exceptions import UnsupportedFileTypeError
from medihelp.media.models import Modality, Picker, UploadedFile

IMAGE_MIME_TYPES = frozenset({"image/jpeg", "image/png", "image/webp"})
DOCUMENT_MIME_TYPES = frozenset({"application/pdf"})
AUDIO_MIME_TYPES = frozenset(
    {"audio/mp3", "audio/mpeg", "audio/wav", "audio/ogg", "audio/webm"}
)

# Order matters: it is the `accept` attribute of each picker.
PICKER_ACCEPT: dict[Picker, tuple[str, ...]] = {
    Picker.DOCUMENT: ("image/jpeg", "image/png", "image/webp", "application/pdf"),
    Picker.SPEECH: ("audio/mp3", "audio/mpeg", "audio/wav", "audio/ogg", "audio/webm"),
}


def modality_for(mime_type: str, picker: Picker) -> Modality:
    """Classify a MIME type for the given picker.

    Raises:
        UnsupportedFileTypeError: if the type is not in the picker's allow-list.
    """
    if picker is Picker.DOCUMENT:
        if mime_type in IMAGE_MIME_TYPES:
            return Modality.IMAGE
        if mime_type in DOCUMENT_MIME_TYPES:
            return Modality.DOCUMENT
    elif picker is Picker.SPEECH and mime_type in AUDIO_MIME_TYPES:
        return Modality.AUDIO
    raise UnsupportedFileTypeError(mime_type, picker.value)


class MediaNormalizer:
    """Validates a selection and recompresses images to JPEG."""

    def __init__(self, compressor: BaseImageCompressor) -> None:
        self._compressor = compressor

    def validate(self, data: bytes, mime_type: str, picker: Picker, name: str = "") -> UploadedFile:
        """Build an UploadedFile after checking the picker's allow-list."""
        modality = modality_for(mime_type, picker)
        return UploadedFile(data=data, mime_type=mime_type, modality=modality, name=name)

    def normalize(self, file: UploadedFile) -> UploadedFile:
        """Return the file to encode: JPEG bytes for images, the input otherwise."""
        if file.modality is not Modality.IMAGE:
            return file
        compressed = self._compressor.compress(file.data)
        Log.debug(
            f"Recompressed {file.name or 'image'} ({file.mime_type}): "
            f"{file.size_bytes} -> {len(compressed)} bytes"
        )
        return replace(file, data=compressed, mime_type="image/jpeg")
