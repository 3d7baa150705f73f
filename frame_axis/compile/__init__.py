from .write_batch import FullRewrite, ReplaceRect, WriteBatch, compile_full_rewrite_batch, compile_replace_rect_batch

__all__ = [
    "FullRewrite",
    "ReplaceRect",
    "WriteBatch",
    "compile_full_rewrite_batch",
    "compile_replace_rect_batch",
]
