# ABOUTME: Directory and file management for an export run.
# ABOUTME: Lays out the page directory, its shared images folder and the raw JSON dump.

import json
import logging
from pathlib import Path

from ..markdown.sanitize import sanitize_name, sanitize_text

logger = logging.getLogger(__name__)


class ExportStorage:
    """Manages the output directory structure for one page."""

    def __init__(self, output_dir: Path, page_name: str):
        """Initialize storage for an export run.

        Args:
            output_dir: Base path for all exports (e.g., ./output).
            page_name: Display name of the exported page.
        """
        self.output_dir = output_dir
        self.page_name = page_name
        self.page_path = output_dir / sanitize_name(page_name)
        self.images_path = self.page_path / "images"

    def create_directories(self) -> None:
        """Create the page directory."""
        self.page_path.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created page directory: {self.page_path}")

    def create_images_directory(self) -> None:
        """Create the images directory shared by all frames of the page."""
        self.images_path.mkdir(parents=True, exist_ok=True)


def save_document_json(data: dict, file_path: Path) -> Path:
    """Save the raw document tree as JSON.

    Line and paragraph separators are stripped from the serialized text.

    Args:
        data: Document response from the Figma API.
        file_path: Destination path.

    Returns:
        Path to the saved file.
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)
    content = sanitize_text(json.dumps(data, indent=2, ensure_ascii=False))
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.debug(f"Saved document JSON: {file_path}")
    return file_path
