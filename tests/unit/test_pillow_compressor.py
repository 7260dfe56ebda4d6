import io

import pytest
from PIL import Image

from medihelp.media.exceptions import ImageCompressionError
from medihelp.media.pillow_compressor import PillowJpegCompressor


def _open(data: bytes) -> Image.Image:
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


class TestPillowJpegCompressor:
    @pytest.mark.parametrize("fixture_name", ["png_bytes", "jpeg_bytes", "webp_bytes"])
    def test_output_is_jpeg(self, fixture_name: str, request: pytest.FixtureRequest) -> None:
        source = request.getfixturevalue(fixture_name)
        result = PillowJpegCompressor().compress(source)
        assert result[:3] == b"\xff\xd8\xff"
        assert _open(result).format == "JPEG"

    def test_keeps_pixel_dimensions(self, png_bytes: bytes) -> None:
        result = PillowJpegCompressor().compress(png_bytes)
        assert _open(result).size == (64, 48)

    def test_transparent_pixels_become_black(self) -> None:
        buf = io.BytesIO()
        Image.new("RGBA", (16, 16), (255, 255, 255, 0)).save(buf, format="PNG")
        result = _open(PillowJpegCompressor().compress(buf.getvalue()))
        r, g, b = result.convert("RGB").getpixel((8, 8))
        assert max(r, g, b) < 16

    def test_applies_exif_orientation(self) -> None:
        image = Image.new("RGB", (40, 20), (0, 128, 0))
        exif = Image.Exif()
        exif[0x0112] = 6  # rotate 90 degrees clockwise on display
        buf = io.BytesIO()
        image.save(buf, format="JPEG", exif=exif.tobytes())
        result = _open(PillowJpegCompressor().compress(buf.getvalue()))
        assert result.size == (20, 40)

    def test_lower_quality_gives_smaller_output(self) -> None:
        image = Image.effect_noise((128, 128), 64).convert("RGB")
        buf = io.BytesIO()
        image.save(buf, format="PNG")
        low = PillowJpegCompressor(quality=10).compress(buf.getvalue())
        high = PillowJpegCompressor(quality=90).compress(buf.getvalue())
        assert len(low) < len(high)

    def test_undecodable_bytes_raise(self) -> None:
        with pytest.raises(ImageCompressionError, match="Cannot decode"):
            PillowJpegCompressor().compress(b"not an image")

    def test_decompression_bomb_raises(
        self, png_bytes: bytes, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)
        with pytest.raises(ImageCompressionError, match="Cannot decode"):
            PillowJpegCompressor().compress(png_bytes)

    @pytest.mark.parametrize("quality", [0, 96])
    def test_rejects_out_of_range_quality(self, quality: int) -> None:
        with pytest.raises(ValueError, match="between 1 and 95"):
            PillowJpegCompressor(quality=quality)
