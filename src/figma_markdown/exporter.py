# ABOUTME: Runs an export of a Figma document to Markdown, one file per frame.
# ABOUTME: Frames are processed sequentially: collect, sort, resolve images, write.

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

from .config import Config
from .export import ExportStorage, resolve_images, save_document_json
from .figma import FigmaClient
from .markdown import MarkdownWriter, collect_nodes, sort_reading_order

logger = logging.getLogger(__name__)


class ExportError(Exception):
    """Raised when the fetched document cannot be exported."""
    pass


@dataclass
class FrameResult:
    """Outcome of exporting a single frame."""
    name: str
    markdown_path: Path | None = None
    records: int = 0
    images_downloaded: int = 0


@dataclass
class ExportSummary:
    """Statistics for one export run."""
    page_name: str
    page_path: Path
    frames_written: int = 0
    frames_skipped: int = 0
    images_downloaded: int = 0
    image_errors: list[dict] = field(default_factory=list)
    duration_seconds: float = 0.0


def create_client(config: Config) -> FigmaClient:
    """Build an authenticated client from configuration."""
    return FigmaClient(config.get_token(), api_base=config.api_base, timeout=config.request_timeout)


def get_first_page(document: dict) -> dict:
    """Return the first page of a fetched file response."""
    pages = (document.get("document") or {}).get("children") or []
    if not pages:
        raise ExportError("Document has no pages")
    return pages[0]


def export_frame(
    frame: dict,
    client: FigmaClient,
    config: Config,
    storage: ExportStorage,
    writer: MarkdownWriter,
    errors: list[dict] | None = None,
) -> FrameResult:
    """Export a single frame to Markdown and download its images.

    Frames without any text or image content are skipped and produce no file.

    Args:
        frame: Figma frame node dict.
        client: Figma API client.
        config: Application configuration.
        storage: Output layout for the page.
        writer: Markdown writer for the page.
        errors: Optional list that receives image download failures.

    Returns:
        FrameResult describing what was written.
    """
    name = frame.get("name", "")
    records = collect_nodes(frame)
    if not records:
        logger.debug(f"Frame '{name}' has no content, skipping")
        return FrameResult(name=name)

    records = sort_reading_order(records)

    storage.create_images_directory()
    image_map = resolve_images(
        client,
        config.file_key,
        storage.images_path,
        records,
        strict=config.strict_images,
        errors=errors,
    )

    md_path = writer.write_frame(frame, records, image_map)
    logger.info(f"Generated {md_path}")

    return FrameResult(
        name=name,
        markdown_path=md_path,
        records=len(records),
        images_downloaded=len(image_map),
    )


def export_document(config: Config, client: FigmaClient | None = None) -> ExportSummary:
    """Export every frame of the document's first page.

    Args:
        config: Application configuration.
        client: Optional pre-built client; created from config if omitted.

    Returns:
        ExportSummary with run statistics.
    """
    start = time.monotonic()
    if client is None:
        client = create_client(config)

    document = client.get_file(config.file_key)
    save_document_json(document, config.raw_dump_path)

    page = get_first_page(document)
    page_name = page.get("name", "")
    logger.info(f"Top page: {page_name}")

    storage = ExportStorage(config.output_dir, page_name)
    storage.create_directories()
    writer = MarkdownWriter(storage.page_path)

    summary = ExportSummary(page_name=page_name, page_path=storage.page_path)
    for frame in page.get("children") or []:
        result = export_frame(frame, client, config, storage, writer, summary.image_errors)
        if result.markdown_path is None:
            summary.frames_skipped += 1
            continue
        summary.frames_written += 1
        summary.images_downloaded += result.images_downloaded

    summary.duration_seconds = round(time.monotonic() - start, 2)
    logger.info(
        f"Export complete: {summary.frames_written} frames, "
        f"{summary.images_downloaded} images, "
        f"{summary.frames_skipped} empty frames skipped, "
        f"{len(summary.image_errors)} image errors ({summary.duration_seconds:.1f}s total)"
    )
    return summary


def list_frames(config: Config, client: FigmaClient | None = None) -> list[dict]:
    """List the frames of the document's first page.

    Returns:
        List of dicts with 'id' and 'name' keys, in document order.
    """
    if client is None:
        client = create_client(config)

    page = get_first_page(client.get_file(config.file_key))
    return [
        {"id": frame.get("id", ""), "name": frame.get("name", "")}
        for frame in page.get("children") or []
    ]
