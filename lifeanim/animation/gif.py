"""Animated GIF output for generated animations."""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Union

from .generator import Animation

logger = logging.getLogger(__name__)

TICK_MS = 10  # GIF delays are stored in 1/100 s


def write_gif(animation: Animation, fp: Union[str, Path, BinaryIO], loop: int = 0) -> None:
    """Encode all frames of ``animation`` into an animated GIF.

    Args:
        animation: Result of ``AnimationGenerator.generate``
        fp: Output path or binary file object
        loop: Number of loops, 0 for forever

    Raises:
        ValueError: If the animation has no frames
    """
    if not animation.frames:
        raise ValueError("Cannot write GIF without frames")

    first, rest = animation.frames[0], animation.frames[1:]
    durations = [delay * TICK_MS for delay in animation.delays]

    first.save(
        fp,
        format="GIF",
        save_all=True,
        append_images=rest,
        duration=durations if len(durations) > 1 else durations[0],
        loop=loop,
        optimize=False,
    )
    logger.debug(f"Wrote GIF with {len(animation.frames)} frames")


def encode_gif(animation: Animation, loop: int = 0) -> bytes:
    """Return ``animation`` encoded as GIF bytes."""
    buffer = io.BytesIO()
    write_gif(animation, buffer, loop=loop)
    return buffer.getvalue()
