"""Load an initial grid from a JSON save document.

Expected document::

    {"Width": 5, "Height": 3, "Cells": ["     ", " ooo ", "     "]}

Keys are matched case-insensitively. In each row string a space is a dead
cell and any other character an alive one; rows may be shorter than
``Width`` and missing rows are dead.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from ..core.errors import PatternError
from ..core.grid import Grid

logger = logging.getLogger(__name__)


def _field(document: Dict[str, Any], name: str) -> Any:
    for key, value in document.items():
        if key.lower() == name.lower():
            return value
    raise PatternError(f"Missing '{name}' in grid document")


def grid_from_document(document: Any) -> Grid:
    """Build a grid from an already-parsed save document.

    Raises:
        PatternError: If fields are missing, mistyped or rows exceed the size
        InvalidDimensionError: If Width or Height is not positive
    """
    if not isinstance(document, dict):
        raise PatternError("Grid document must be a JSON object")

    width = _field(document, "Width")
    height = _field(document, "Height")
    cells = _field(document, "Cells")

    if isinstance(width, bool) or not isinstance(width, int) or isinstance(height, bool) or not isinstance(height, int):
        raise PatternError("Width and Height must be integers")
    if not isinstance(cells, list) or not all(isinstance(row, str) for row in cells):
        raise PatternError("Cells must be a list of strings")

    grid = Grid(width, height)

    if len(cells) > height:
        raise PatternError(f"Document has {len(cells)} rows but Height is {height}")
    for y, row in enumerate(cells):
        if len(row) > width:
            raise PatternError(f"Row {y} has {len(row)} cells but Width is {width}")

    for y, row in enumerate(cells):
        for x, char in enumerate(row):
            grid.set(x, y, char != ' ')

    logger.debug(f"Loaded {grid!r} from document")
    return grid


def load_from_json(path: Union[str, Path]) -> Grid:
    """Load a grid from a JSON file.

    Raises:
        OSError: If the file cannot be read
        PatternError: If the document is not valid
    """
    text = Path(path).read_text(encoding="utf-8")
    return load_from_json_string(text)


def load_from_json_string(text: str) -> Grid:
    """Load a grid from JSON text."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise PatternError(f"Invalid JSON: {e}") from e
    return grid_from_document(document)
