# ABOUTME: Renders ordered content records into a Markdown document.
# ABOUTME: Produces a heading followed by a flat run of paragraphs and images.

from .collector import ContentRecord, ImageRecord, TextRecord
from .sanitize import sanitize_name, sanitize_text


def image_filename(name: str) -> str:
    """File name used for an exported image node."""
    return f"{sanitize_name(name)}.png"


def image_link(record: ImageRecord) -> str:
    """Markdown reference to an image record's exported PNG."""
    return f"![{record.name}](./images/{image_filename(record.name)})"


def record_to_markdown(record: ContentRecord) -> str:
    """Convert a single record to a Markdown paragraph.

    Image references are emitted whether or not the file was downloaded.
    """
    if isinstance(record, TextRecord):
        return sanitize_text(record.text) + "\n\n"

    if isinstance(record, ImageRecord):
        return image_link(record) + "\n\n"

    raise TypeError(f"Unsupported record type: {type(record).__name__}")


def records_to_markdown(frame_name: str, records: list[ContentRecord]) -> str:
    """Render a frame's ordered records as Markdown.

    Args:
        frame_name: Display name of the frame, used as the level-1 heading.
        records: Records already sorted in reading order.

    Returns:
        Markdown string.
    """
    parts = [f"# {frame_name}\n\n"]
    parts.extend(record_to_markdown(record) for record in records)
    return "".join(parts)
