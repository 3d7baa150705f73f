from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Protocol


RGBA = tuple[int, int, int, int]

DEFAULT_FONT_FAMILY = "Comic Mono"
DEFAULT_FONT_SIZE_PX = 13.0


@dataclass(frozen=True)
class FontSpec:
    """Font definition from either system lookup or explicit file path.

    If `file_path` is set, renderer should prefer file-backed font loading.
    """

    family: str = DEFAULT_FONT_FAMILY
    size_px: float = DEFAULT_FONT_SIZE_PX
    file_path: str | None = None

    def __post_init__(self) -> None:
        if not self.family.strip() and self.file_path is None:
            raise ValueError("FontSpec requires `family` when `file_path` is not set")
        if self.file_path is not None and not str(self.file_path).strip():
            raise ValueError("FontSpec `file_path` must be non-empty when provided")
        if self.size_px <= 0:
            raise ValueError("FontSpec `size_px` must be > 0")

    @property
    def source_kind(self) -> Literal["system", "file"]:
        return "file" if self.file_path else "system"

    @property
    def normalized_file_path(self) -> Path | None:
        if self.file_path is None:
            return None
        return Path(self.file_path)


@dataclass(frozen=True)
class TextMeasureRequest:
    text: str
    font: FontSpec


@dataclass(frozen=True)
class TextLayoutMetrics:
    width_px: float
    height_px: float


@dataclass(frozen=True)
class TextRenderCommand:
    """One label; `x` is the left edge and `y` the baseline."""

    component_id: str
    text: str
    x: float
    y: float
    font: FontSpec
    color: RGBA


@dataclass(frozen=True)
class TextRenderBatch:
    """Render list for a single pass; backends should draw in one batch call."""

    commands: tuple[TextRenderCommand, ...]


class LabelMetrics(Protocol):
    """Host text measurement used for interval selection and label placement."""

    def measure_text(self, request: TextMeasureRequest) -> TextLayoutMetrics:
        ...


class AxisSurface(Protocol):
    """Drawing target the axis clears and repaints on every render pass."""

    def clear(self, width: float, height: float) -> None:
        ...

    def draw_text_batch(self, batch: TextRenderBatch) -> None:
        ...
