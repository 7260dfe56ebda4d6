from abc import ABC, abstractmethod


class BaseImageCompressor(ABC):
    """Contract for image recompression adapters."""

    @abstractmethod
    def compress(self, image_bytes: bytes) -> bytes:
        """Redraw an image at its original dimensions and re-encode it as JPEG.

        Args:
            image_bytes: Raw JPEG, PNG or WEBP file content.

        Returns:
            JPEG-encoded bytes.

        Raises:
            ImageCompressionError: if the image cannot be decoded or encoded.
        """
