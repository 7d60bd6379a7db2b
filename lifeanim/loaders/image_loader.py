"""Load an initial grid from a raster image.

One pixel is one cell. Pixels whose grayscale luminance is below the
threshold (i.e. very dark) are alive. Transparency is composited over black
first, so fully transparent pixels are alive.
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..config import LUMINANCE_THRESHOLD
from ..core.errors import PatternError
from ..core.grid import Grid

logger = logging.getLogger(__name__)


def _flatten(image: Image.Image) -> Image.Image:
    """Composite any alpha channel over black."""
    if image.mode in ("RGBA", "LA", "PA") or "transparency" in image.info:
        rgba = image.convert("RGBA")
        background = Image.new("RGBA", rgba.size, (0, 0, 0, 255))
        return Image.alpha_composite(background, rgba)
    return image


def load_from_image(image: Image.Image, threshold: int = LUMINANCE_THRESHOLD) -> Grid:
    """Build a grid from a Pillow image.

    Args:
        image: Source image, any mode
        threshold: Luminance (0-255) below which a pixel is alive
    """
    width, height = image.size
    grid = Grid(width, height)

    luminance = np.asarray(_flatten(image).convert("L"))
    grid.set_cells(luminance < threshold)

    logger.debug(f"Loaded {grid!r} from {image.mode} image")
    return grid


def load_from_image_file(path: Union[str, Path], threshold: int = LUMINANCE_THRESHOLD) -> Grid:
    """Open an image file (PNG, JPEG, ...) and build a grid from it.

    Raises:
        OSError: If the file cannot be read
        PatternError: If the file is not a recognised image
    """
    try:
        with Image.open(path) as image:
            image.load()
            return load_from_image(image, threshold=threshold)
    except UnidentifiedImageError as e:
        raise PatternError(f"Not a recognised image: {path}") from e
