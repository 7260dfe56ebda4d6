from medihelp.media.encoder import Base64Encoder
from medihelp.media.intake import FileIntake
from medihelp.media.models import EncodedPayload, Modality, Picker, UploadedFile
from medihelp.media.normalizer import MediaNormalizer
from medihelp.media.pillow_compressor import PillowJpegCompressor

__all__ = [
    "Base64Encoder",
    "EncodedPayload",
    "FileIntake",
    "MediaNormalizer",
    "Modality",
    "Picker",
    "PillowJpegCompressor",
    "UploadedFile",
]
