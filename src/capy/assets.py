"""Startup assets: the two font faces and the category tag bitmaps."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Mapping

from PIL import Image, UnidentifiedImageError

from .errors import AssetError

_LOGGER = logging.getLogger(__name__)

DEFAULT_ASSETS_DIR = Path(__file__).resolve().parent / "resources"
TEXT_FONT = Path("fonts") / "Lato-Regular.ttf"
ICON_FONT = Path("fonts") / "SourceCodePro-Bold.ttf"
TAG_IMAGES: tuple[str, ...] = ("stack-overflow.png", "stack-exchange.png", "geek-for-geeks.png")

# sfnt version tags for TrueType, OpenType/CFF and legacy Apple fonts.
_FONT_SIGNATURES: tuple[bytes, ...] = (b"\x00\x01\x00\x00", b"OTTO", b"true", b"typ1")


@dataclass(frozen=True, slots=True)
class ImageAsset:
    name: str
    data: bytes
    size: tuple[int, int]


@dataclass(slots=True)
class AssetBundle:
    """Raw bytes of every asset the window needs, keyed for lookup by the renderer."""

    text_font: bytes
    icon_font: bytes
    images: Dict[str, ImageAsset] = field(default_factory=dict)

    def image(self, name: str) -> ImageAsset:
        try:
            return self.images[name]
        except KeyError:
            raise AssetError(name, "image was not loaded at startup") from None


def _read_bytes(path: Path) -> bytes:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise AssetError(path, exc.strerror or str(exc)) from exc
    if not data:
        raise AssetError(path, "file is empty")
    return data


def load_font(path: Path) -> bytes:
    data = _read_bytes(path)
    if data[:4] not in _FONT_SIGNATURES:
        raise AssetError(path, "not a TrueType/OpenType font")
    return data


def load_image(path: Path) -> ImageAsset:
    data = _read_bytes(path)
    try:
        with Image.open(io.BytesIO(data)) as image:
            image.verify()
            size = image.size
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise AssetError(path, f"unreadable image ({exc})") from exc
    return ImageAsset(name=path.name, data=data, size=size)


def load_assets(
    root: Path | str | None = None,
    *,
    images: Iterable[str] = TAG_IMAGES,
    fonts: Mapping[str, Path] | None = None,
) -> AssetBundle:
    """Read every asset under ``root``; any failure raises :class:`AssetError`."""

    base = Path(root).expanduser() if root is not None else DEFAULT_ASSETS_DIR
    font_paths = dict(fonts or {"text": TEXT_FONT, "icons": ICON_FONT})
    bundle = AssetBundle(
        text_font=load_font(base / font_paths["text"]),
        icon_font=load_font(base / font_paths["icons"]),
    )
    for name in images:
        bundle.images[name] = load_image(base / "images" / name)
    _LOGGER.debug("Loaded %d font(s) and %d image(s) from %s", 2, len(bundle.images), base)
    return bundle


__all__ = [
    "AssetBundle",
    "DEFAULT_ASSETS_DIR",
    "ImageAsset",
    "TAG_IMAGES",
    "load_assets",
    "load_font",
    "load_image",
]
