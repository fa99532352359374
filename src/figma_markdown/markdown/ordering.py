# ABOUTME: Reading-order sort for collected content records.
# ABOUTME: Orders records top-to-bottom, then left-to-right.

from .collector import ContentRecord


def reading_order_key(record: ContentRecord) -> tuple[float, float]:
    return (record.position.y, record.position.x)


def sort_reading_order(records: list[ContentRecord]) -> list[ContentRecord]:
    """Sort records by vertical position, breaking exact ties by horizontal position.

    The sort is stable, so records at identical coordinates keep their tree
    order. No column detection is done: boxes that overlap vertically in
    different columns can interleave.
    """
    return sorted(records, key=reading_order_key)
