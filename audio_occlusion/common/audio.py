"""Distance-based audio volume calculation."""

import math


def get_volume(
    path_distance: float, max_distance: float, full_volume_distance: float
) -> float:
    """Get volume for a travel distance along an unobstructed path.

    Full volume up to full_volume_distance, then a linear falloff that
    reaches silence at max_distance. Unreachable listeners (inf) are silent.
    """
    if math.isinf(path_distance) or path_distance >= max_distance:
        return 0.0
    if path_distance <= full_volume_distance:
        return 1.0
    return 1.0 - (path_distance - full_volume_distance) / (
        max_distance - full_volume_distance
    )
