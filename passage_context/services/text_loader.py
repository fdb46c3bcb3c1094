"""Reference text loading from the data directory."""

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = re.compile(r"\.(txt|csv|json|toon|onnx|safetensors|pt|py|gguf)$", re.IGNORECASE)


class DocumentLoadError(IOError):
    """The reference text could not be read."""


class UnsupportedFileTypeError(ValueError):
    """The requested file name has an extension the loader refuses."""


class TextLoader:
    """Reads one text file from a data folder.

    Args:
        data_dir: Folder holding the file, relative to the working directory
            unless absolute
        file_name: File to read, e.g. ``heart-of-darkness.txt``
    """

    def __init__(self, data_dir: str | Path, file_name: str):
        if not ALLOWED_EXTENSIONS.search(file_name):
            raise UnsupportedFileTypeError(f"Unsupported file type: {file_name}")
        self.file_name = file_name
        self.file_path = str(Path.cwd() / data_dir / file_name)

    def read(self) -> str | None:
        """Read the file as UTF-8.

        Returns:
            File content, or None when the file is empty.

        Raises:
            DocumentLoadError: The file is missing or unreadable.
        """
        try:
            content = Path(self.file_path).read_text(encoding="utf-8")
        except FileNotFoundError:
            raise DocumentLoadError(
                f'Error reading file "{self.file_path}": File not found: {self.file_name}'
            ) from None
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentLoadError(f'Error reading file "{self.file_path}": {e}') from e

        if not content:
            return None

        logger.debug(f"Read {len(content)} chars from {self.file_path}")
        return content
