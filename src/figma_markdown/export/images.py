# ABOUTME: Resolves and downloads exported PNG images for a frame.
# ABOUTME: One batched URL lookup per frame, then one download per image node.

import logging
from pathlib import Path

import requests

from ..figma.client import FigmaClient
from ..markdown.collector import ContentRecord, ImageRecord
from ..markdown.converter import image_filename

logger = logging.getLogger(__name__)

# Timeout for image downloads (seconds)
DOWNLOAD_TIMEOUT = 30

IMAGE_FORMAT = "png"


def image_path(images_dir: Path, record: ImageRecord) -> Path:
    """Local path an image record is saved to."""
    return images_dir / image_filename(record.name)


def download_file(url: str, destination: Path, timeout: float = DOWNLOAD_TIMEOUT) -> int:
    """Download a file from URL to destination, overwriting it.

    The body is streamed into a sibling ".part" file that replaces the
    destination only once the download completes, so a failed download
    leaves any existing file untouched.

    Args:
        url: The file URL.
        destination: Path to save the file.
        timeout: Request timeout in seconds.

    Returns:
        File size in bytes.

    Raises:
        requests.RequestException: If the request fails.
        OSError: If the file cannot be written.
    """
    response = requests.get(url, timeout=timeout, stream=True)
    response.raise_for_status()

    partial = destination.with_name(destination.name + ".part")
    size = 0
    try:
        with open(partial, "wb") as f:
            for chunk in response.iter_content(chunk_size=8192):
                f.write(chunk)
                size += len(chunk)
        partial.replace(destination)
    finally:
        partial.unlink(missing_ok=True)

    return size


def resolve_images(
    client: FigmaClient,
    file_key: str,
    images_dir: Path,
    records: list[ContentRecord],
    strict: bool = False,
    errors: list[dict] | None = None,
) -> dict[str, Path]:
    """Fetch export URLs for a frame's image records and download them.

    Args:
        client: Figma API client.
        file_key: The Figma file key.
        images_dir: Directory images are written to.
        records: The frame's records; only ImageRecords are resolved.
        strict: If True, a failed download aborts instead of being skipped.
        errors: Optional list that receives one dict per failed download.

    Returns:
        Mapping of node ID to local path for every image that was saved.
    """
    image_records = [r for r in records if isinstance(r, ImageRecord)]
    if not image_records:
        return {}

    urls = client.get_image_urls(file_key, [r.id for r in image_records], image_format=IMAGE_FORMAT)

    resolved: dict[str, Path] = {}
    for record in image_records:
        url = urls.get(record.id)
        if not url:
            logger.debug(f"No export URL for '{record.name}' ({record.id}), skipping")
            continue

        destination = image_path(images_dir, record)
        try:
            download_file(url, destination)
        except (requests.RequestException, OSError) as e:
            if strict:
                raise
            logger.warning(f"Failed to download image '{record.name}' ({record.id}): {e}")
            if errors is not None:
                errors.append({"type": "image", "id": record.id, "name": record.name, "error": str(e)})
            continue

        logger.info(f"Saved image {destination}")
        resolved[record.id] = destination

    return resolved
