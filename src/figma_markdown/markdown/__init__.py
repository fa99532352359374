# ABOUTME: Markdown conversion package.
# ABOUTME: Exports node collection, ordering, rendering and writer functions.

from .collector import ContentRecord, ImageRecord, Position, TextRecord, collect_nodes
from .converter import image_filename, image_link, records_to_markdown
from .ordering import sort_reading_order
from .sanitize import sanitize_name, sanitize_text
from .writer import MarkdownWriter

__all__ = [
    "ContentRecord",
    "ImageRecord",
    "Position",
    "TextRecord",
    "collect_nodes",
    "image_filename",
    "image_link",
    "records_to_markdown",
    "sort_reading_order",
    "sanitize_name",
    "sanitize_text",
    "MarkdownWriter",
]
