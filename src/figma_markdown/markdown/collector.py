# ABOUTME: Collects text and image records from a Figma node tree.
# ABOUTME: Export roots own their whole subtree and suppress nested text.

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Top-left corner of a node's absolute bounding box."""
    x: float = 0
    y: float = 0


@dataclass(frozen=True)
class TextRecord:
    """Text content taken from a TEXT node."""
    name: str
    text: str
    position: Position


@dataclass(frozen=True)
class ImageRecord:
    """A node flagged for standalone PNG export."""
    name: str
    id: str
    position: Position


ContentRecord = TextRecord | ImageRecord


def get_position(node: dict) -> Position:
    """Read the node's bounding box position, defaulting missing values to 0."""
    box = node.get("absoluteBoundingBox") or {}
    return Position(x=box.get("x") or 0, y=box.get("y") or 0)


def is_export_root(node: dict) -> bool:
    """Check whether a node carries non-empty export settings."""
    return bool(node.get("exportSettings"))


def collect_nodes(
    node: dict,
    skip_text: bool = False,
    records: list[ContentRecord] | None = None,
) -> list[ContentRecord]:
    """Collect content records from a node tree in depth-first pre-order.

    A node with export settings yields a single ImageRecord and its children
    are not visited, so text inside an exported group never appears twice.

    Args:
        node: Figma node dict (frame, group, text, ...).
        skip_text: If True, TEXT nodes are not collected.
        records: Accumulator for recursive calls.

    Returns:
        List of TextRecord and ImageRecord in tree order.
    """
    if records is None:
        records = []

    if is_export_root(node):
        records.append(ImageRecord(
            name=node.get("name", ""),
            id=node["id"],
            position=get_position(node),
        ))
        return records

    if not skip_text and node.get("type") == "TEXT" and node.get("characters"):
        records.append(TextRecord(
            name=node.get("name", ""),
            text=node["characters"],
            position=get_position(node),
        ))

    for child in node.get("children") or []:
        collect_nodes(child, skip_text, records)

    return records
