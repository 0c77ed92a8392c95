"""Reconstruction — восстановление секрета и рендеринг результата."""

from .driver import (
    ReconstructionResult,
    reconstruct,
    render_json,
    render_text,
)

__all__ = [
    "ReconstructionResult",
    "reconstruct",
    "render_json",
    "render_text",
]
