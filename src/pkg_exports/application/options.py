"""Typed option objects for exports generation use-cases."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationOptions:
    """Options shared by exports generation use-cases."""

    out_dir: str = "dist"
    mode: bool | tuple[str, ...] = True
    write: bool = False
