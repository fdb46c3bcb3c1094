"""Service layer: collaborators the engine depends on."""

from .text_loader import DocumentLoadError, TextLoader, UnsupportedFileTypeError

__all__ = [
    "DocumentLoadError",
    "TextLoader",
    "UnsupportedFileTypeError",
]
