"""
Discrete-entity repetition.

Some textures show countable real-world elements (planks, bricks, tiles).
Instead of repeating such a texture at its nominal size and cutting an
element in half at the end of a surface, the tile size is stretched slightly
so that a whole number of elements fits the measured length.

Example:
    A 2m wide plank texture showing 4 planks (0.5m each) on a 2.1m wall:
    round(2.1 / 0.5) = 4 planks, the texture repeats 4 / 4 = 1 time,
    so the effective tile width is 2.1m.
"""

import math


def entity_count(length: float, entity_size: float) -> int:
    """
    Number of whole entities that best fits a length (at least 1).

    Halves round up.
    """
    return max(1, int(math.floor(length / entity_size + 0.5)))


def intrinsic_repeats(nominal_size: float, entity_size: float) -> float:
    """How many entities one repeat of the texture shows."""
    return nominal_size / entity_size


def effective_tile_size(length: float, nominal_size: float, entity_size: float) -> float:
    """
    World size of one texture repeat so that whole entities cover a length.

    Args:
        length: Measured world length of the surface
        nominal_size: Nominal texture width or height
        entity_size: World size of one discrete entity

    Returns:
        length * nominal_size / (entity_count * entity_size), 0 for zero length
    """
    texture_repeats = entity_count(length, entity_size) / intrinsic_repeats(nominal_size, entity_size)
    return length / texture_repeats
