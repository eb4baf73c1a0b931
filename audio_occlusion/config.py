"""Configuration for building and querying zoned maps."""

from __future__ import annotations

from dataclasses import dataclass

from .common.constants import AUDIO_FULL_VOLUME_FRACTION, DEFAULT_SPEAKING_RADIUS


@dataclass
class MapConfig:
    """Settings shared by ZonedMap construction and OcclusionRouter."""

    speaking_radius: float = DEFAULT_SPEAKING_RADIUS
    full_volume_distance: float | None = None  # None means a fraction of the radius
    # Exact (clamped) wall selection instead of the infinite-line test
    clamp_wall_test: bool = False

    def __post_init__(self) -> None:
        if self.speaking_radius <= 0:
            raise ValueError(
                f"speaking_radius must be positive, got {self.speaking_radius}"
            )
        if self.full_volume_distance is None:
            self.full_volume_distance = (
                self.speaking_radius * AUDIO_FULL_VOLUME_FRACTION
            )
        if not 0 <= self.full_volume_distance < self.speaking_radius:
            raise ValueError(
                "full_volume_distance must be in [0, speaking_radius), "
                f"got {self.full_volume_distance}"
            )

    @property
    def full_volume(self) -> float:
        """Resolved full-volume distance."""
        assert self.full_volume_distance is not None
        return self.full_volume_distance
