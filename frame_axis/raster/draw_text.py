from __future__ import annotations

from functools import lru_cache
import logging
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from frame_axis.text.renderer import RGBA, FontSpec


LOGGER = logging.getLogger(__name__)

MONO_FONT_FALLBACK_PATTERNS = (
    "comicmono",
    "comic mono",
    "menlo",
    "monaco",
    "courier new",
    "courier",
    "dejavusansmono",
    "dejavu sans mono",
)

FONT_DIRS = (
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/System/Library/Fonts/Supplemental"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
)


def draw_text(dst: np.ndarray, x: int, y: int, text: str, color: RGBA, *, font: FontSpec) -> None:
    """Blend `text` into `dst` with its ink box's top-left corner at (x, y)."""

    if not text:
        return
    mask = _render_mask(text=text, font=_load_font(font))
    _blend_mask(dst, x, y, mask, color)


def text_size(text: str, *, font: FontSpec) -> tuple[int, int]:
    loaded = _load_font(font)
    if not text:
        ascent, descent = loaded.getmetrics()
        return (0, max(1, int(ascent + descent)))
    left, top, right, bottom = loaded.getbbox(text)
    w = max(0, int(right - left))
    h = max(1, int(bottom - top))
    return (w, h)


def _blend_mask(dst: np.ndarray, x: int, y: int, mask: np.ndarray, color: RGBA) -> None:
    h, w = mask.shape
    if h <= 0 or w <= 0:
        return

    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(dst.shape[1], x + w)
    y1 = min(dst.shape[0], y + h)
    if x1 <= x0 or y1 <= y0:
        return

    sx0 = x0 - x
    sy0 = y0 - y
    sx1 = sx0 + (x1 - x0)
    sy1 = sy0 + (y1 - y0)

    cov = mask[sy0:sy1, sx0:sx1].astype(np.float32) / 255.0
    src_alpha = (color[3] / 255.0) * cov
    if not np.any(src_alpha > 0):
        return

    patch = dst[y0:y1, x0:x1]
    dst_rgb = patch[:, :, :3].astype(np.float32)
    dst_alpha = patch[:, :, 3].astype(np.float32) / 255.0

    src_rgb = np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3)
    out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
    out_rgb_num = src_rgb * src_alpha[:, :, None] + dst_rgb * dst_alpha[:, :, None] * (1.0 - src_alpha[:, :, None])
    safe_alpha = np.where(out_alpha > 1e-6, out_alpha, 1.0)
    out_rgb = out_rgb_num / safe_alpha[:, :, None]

    patch[:, :, :3] = np.clip(out_rgb, 0, 255).astype(np.uint8)
    patch[:, :, 3] = np.clip(out_alpha * 255.0, 0, 255).astype(np.uint8)


@lru_cache(maxsize=128)
def _render_mask(text: str, font: ImageFont.FreeTypeFont | ImageFont.ImageFont) -> np.ndarray:
    left, top, right, bottom = font.getbbox(text)
    width = max(1, int(right - left))
    height = max(1, int(bottom - top))
    image = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(image)
    draw.text((-left, -top), text, fill=255, font=font)
    return np.asarray(image, dtype=np.uint8)


@lru_cache(maxsize=64)
def _load_font(font: FontSpec) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    size = max(1, int(round(font.size_px)))
    if font.file_path is not None:
        try:
            return ImageFont.truetype(str(font.normalized_file_path), size=size)
        except OSError as exc:
            LOGGER.warning("font file %s could not be loaded; falling back to `%s` (%s)", font.file_path, font.family, exc)
    font_path = _resolve_font_path(font.family)
    if font_path is None:
        return ImageFont.load_default()
    try:
        return ImageFont.truetype(str(font_path), size=size)
    except OSError as exc:
        LOGGER.warning("font %s could not be loaded; using default font (%s)", font_path, exc)
        return ImageFont.load_default()


@lru_cache(maxsize=32)
def _resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower()
    patterns = ((wanted,) if wanted else ()) + MONO_FONT_FALLBACK_PATTERNS

    candidates: list[Path] = []
    for base in FONT_DIRS:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf", "*.ttc"):
            candidates.extend(base.rglob(ext))

    for pattern in patterns:
        p = pattern.replace(" ", "")
        for path in candidates:
            stem = path.stem.lower().replace(" ", "")
            name = path.name.lower().replace(" ", "")
            if p in stem or p in name:
                return path
    return None
