# ABOUTME: Writes one Markdown file per Figma frame into the page directory.
# ABOUTME: File names are derived from sanitized frame names.

import logging
from pathlib import Path

from .collector import ContentRecord, ImageRecord
from .converter import records_to_markdown
from .sanitize import sanitize_name

logger = logging.getLogger(__name__)


class MarkdownWriter:
    """Writes Markdown files for exported frames."""

    def __init__(self, page_path: Path):
        """Initialize the writer.

        Args:
            page_path: Page directory; image links resolve against its images/ folder.
        """
        self.page_path = page_path

    def get_frame_path(self, frame_name: str) -> Path:
        """Get the Markdown path for a frame."""
        return self.page_path / f"{sanitize_name(frame_name)}.md"

    def write_frame(
        self,
        frame: dict,
        records: list[ContentRecord],
        image_map: dict[str, Path] | None = None,
    ) -> Path:
        """Write a frame as Markdown, overwriting any previous file.

        Args:
            frame: Figma frame node dict.
            records: Records in reading order.
            image_map: Node id to downloaded image path, used only to report
                references that point at missing files.

        Returns:
            Path to the written file.
        """
        frame_name = frame.get("name", "")
        file_path = self.get_frame_path(frame_name)

        if image_map is not None:
            for record in records:
                if isinstance(record, ImageRecord) and record.id not in image_map:
                    logger.debug(f"Image '{record.name}' ({record.id}) was not downloaded, link left dangling")

        content = records_to_markdown(frame_name, records)
        with open(file_path, "w", encoding="utf-8") as f:
            f.write(content)

        logger.debug(f"Wrote markdown: {file_path}")
        return file_path
