import io

from PIL import Image, ImageOps, UnidentifiedImageError

from medihelp.media.base import BaseImageCompressor
from medihelp.media.exceptions import ImageCompressionError


class PillowJpegCompressor(BaseImageCompressor):
    """Lossy JPEG recompression with Pillow at a fixed quality."""

    def __init__(self, quality: int = 10) -> None:
        if not 1 <= quality <= 95:
            raise ValueError(f"JPEG quality must be between 1 and 95, got {quality}")
        self._quality = quality

    @property
    def quality(self) -> int:
        return self._quality

    def compress(self, image_bytes: bytes) -> bytes:
        try:
            with Image.open(io.BytesIO(image_bytes)) as source:
                image = ImageOps.exif_transpose(source) or source
                canvas = self._flatten(image)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
            raise ImageCompressionError(f"Cannot decode image: {exc}") from exc

        out = io.BytesIO()
        try:
            canvas.save(out, format="JPEG", quality=self._quality)
        except OSError as exc:
            raise ImageCompressionError(f"JPEG encoding failed: {exc}") from exc
        return out.getvalue()

    @staticmethod
    def _flatten(image: Image.Image) -> Image.Image:
        # JPEG has no alpha; transparent pixels end up black.
        if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
            rgba = image.convert("RGBA")
            canvas = Image.new("RGB", rgba.size, (0, 0, 0))
            canvas.paste(rgba, mask=rgba.getchannel("A"))
            return canvas
        return image.convert("RGB")
