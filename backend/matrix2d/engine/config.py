"""Engine configuration — knobs for decomposition and animation sampling."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Controls values the decomposer and animation sampler fall back on."""

    # Reported as `scale` when scaleX != scaleY
    scale_fallback: float = 1.0

    # Name of the progress variable animated parameters interpolate over
    progress_variable: str = "progress"
