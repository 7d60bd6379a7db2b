"""Initial-state loaders: JSON documents, marker text and images."""

from .image_loader import load_from_image, load_from_image_file
from .json_loader import grid_from_document, load_from_json, load_from_json_string
from .text_loader import DEFAULT_MARKER, load_from_text

__all__ = [
    'load_from_json',
    'load_from_json_string',
    'grid_from_document',
    'load_from_text',
    'load_from_image',
    'load_from_image_file',
    'DEFAULT_MARKER',
]
