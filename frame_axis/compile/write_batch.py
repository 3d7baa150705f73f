from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

import numpy as np
import torch


TensorLike: TypeAlias = torch.Tensor


@dataclass(frozen=True)
class FullRewrite:
    tensor_h_w_4: TensorLike


@dataclass(frozen=True)
class ReplaceRect:
    x: int
    y: int
    width: int
    height: int
    rect_h_w_4: TensorLike


WriteOp: TypeAlias = FullRewrite | ReplaceRect


@dataclass(frozen=True)
class WriteBatch:
    operations: list[WriteOp]


def _check_rgba(frame_rgba: np.ndarray) -> None:
    if frame_rgba.dtype != np.uint8:
        raise ValueError("frame_rgba must be uint8")
    if frame_rgba.ndim != 3 or frame_rgba.shape[2] != 4:
        raise ValueError("frame_rgba must have shape (H, W, 4)")
    if frame_rgba.shape[0] == 0 or frame_rgba.shape[1] == 0:
        raise ValueError("frame_rgba must be non-empty")


def compile_full_rewrite_batch(frame_rgba: np.ndarray) -> WriteBatch:
    _check_rgba(frame_rgba)
    tensor = torch.from_numpy(np.ascontiguousarray(frame_rgba))
    return WriteBatch([FullRewrite(tensor)])


def compile_replace_rect_batch(frame_rgba: np.ndarray, x: int, y: int, width: int, height: int) -> WriteBatch:
    """Axis strip placed at (x, y) of a host window."""

    _check_rgba(frame_rgba)
    if width <= 0 or height <= 0:
        raise ValueError("rect width/height must be > 0")
    if x < 0 or y < 0:
        raise ValueError("rect x/y must be >= 0")
    if width > frame_rgba.shape[1] or height > frame_rgba.shape[0]:
        raise ValueError("rect exceeds frame bounds")
    patch = torch.from_numpy(np.ascontiguousarray(frame_rgba[:height, :width]))
    return WriteBatch([ReplaceRect(x=x, y=y, width=width, height=height, rect_h_w_4=patch)])
