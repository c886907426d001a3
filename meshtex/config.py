"""
Package-wide defaults.

Values here are read at call time, so tests and applications can override
them through the environment without re-importing the package.

Environment:
    MESHTEX_RESAMPLE: Pillow filter used when a texture is resampled to a
        requested resolution (nearest, bilinear, bicubic, lanczos).
"""

import os
from typing import Optional

from PIL import Image

# Azimuths (radians) closer than this are snapped together by SLOPED_TRIANGLES
ANGLE_CLUSTER_THRESHOLD = 0.02

# Horizontal normal components below this count as a flat triangle
NORMAL_EPSILON = 1e-9

DEFAULT_RESAMPLE = "bilinear"

RESAMPLE_FILTERS = {
    "nearest": Image.NEAREST,
    "bilinear": Image.BILINEAR,
    "bicubic": Image.BICUBIC,
    "lanczos": Image.LANCZOS,
}


def get_resample_filter(name: Optional[str] = None) -> int:
    """
    Resolve a resampling filter name to the Pillow constant.

    Args:
        name: Filter name. If None, MESHTEX_RESAMPLE or DEFAULT_RESAMPLE is used.

    Raises:
        ValueError: If the name is not a known filter
    """
    if name is None:
        name = os.environ.get("MESHTEX_RESAMPLE", DEFAULT_RESAMPLE)
    key = name.strip().lower()
    if key not in RESAMPLE_FILTERS:
        raise ValueError(
            f"Unknown resample filter: {name}. "
            f"Supported: {', '.join(sorted(RESAMPLE_FILTERS))}"
        )
    return RESAMPLE_FILTERS[key]
