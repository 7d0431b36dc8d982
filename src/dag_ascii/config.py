"""Centralized configuration for dag-ascii."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""

    unicode: bool = True
    spacing: int = 1
    root: str | None = None
