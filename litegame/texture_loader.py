"""Image file loading into textures."""

from __future__ import annotations

from PIL import Image

from litegame.types import Texture

_CHANNELS = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}


class TextureLoadError(OSError):
    """Raised when an image cannot be read or decoded."""


def _to_byte_mode(image: Image.Image) -> Image.Image:
    """Convert to 8-bit grey, grey+alpha, RGB or RGBA, keeping the file's channel count."""
    mode = image.mode
    if mode in _CHANNELS:
        return image
    if mode == "P":
        return image.convert("RGBA" if "transparency" in image.info else "RGB")
    if mode == "PA":
        return image.convert("RGBA")
    bands = image.getbands()
    has_alpha = "A" in bands
    if len(bands) <= 2:
        return image.convert("LA" if has_alpha else "L")
    return image.convert("RGBA" if has_alpha else "RGB")


class TextureLoader:
    """Decodes image files, flipped so the first row is the bottom of the image."""

    def load_from_file(self, path: str) -> Texture:
        """Load an image as a texture named after `path`."""
        try:
            with Image.open(path) as image:
                image.load()
                converted = _to_byte_mode(image)
                flipped = converted.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise TextureLoadError(f"Failed to load image: {path}") from exc

        return Texture(
            width=flipped.width,
            height=flipped.height,
            channels=_CHANNELS[flipped.mode],
            pixels=flipped.tobytes(),
            name=path,
        )