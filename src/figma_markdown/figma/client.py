# ABOUTME: Thin client for the Figma REST API.
# ABOUTME: Fetches document trees and batched image export URLs.

import logging

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.figma.com/v1"

# Timeout for API requests (seconds)
DEFAULT_TIMEOUT = 60


class FigmaAPIError(Exception):
    """Raised when a Figma API request fails."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class FigmaClient:
    """Authenticated wrapper around the Figma REST endpoints used for export."""

    def __init__(self, token: str, api_base: str = DEFAULT_API_BASE, timeout: float = DEFAULT_TIMEOUT):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()
        self._session.headers["X-Figma-Token"] = token

    def _get(self, path: str, params: dict | None = None) -> dict:
        url = f"{self.api_base}/{path}"
        try:
            response = self._session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise FigmaAPIError(f"GET {path} failed: {e}", status) from e
        except ValueError as e:
            raise FigmaAPIError(f"GET {path} returned invalid JSON: {e}") from e
        except requests.RequestException as e:
            raise FigmaAPIError(f"GET {path} failed: {e}") from e

    def get_file(self, file_key: str) -> dict:
        """Retrieve the full document tree of a file."""
        logger.info(f"Fetching Figma file {file_key}")
        return self._get(f"files/{file_key}")

    def get_image_urls(self, file_key: str, ids: list[str], image_format: str = "png") -> dict[str, str]:
        """Request rendered export URLs for a batch of node IDs.

        Args:
            file_key: The Figma file key.
            ids: Node IDs to render, sent as one request.
            image_format: Export format understood by the images endpoint.

        Returns:
            Mapping of node ID to download URL. Nodes the API could not
            render are left out.
        """
        data = self._get(
            f"images/{file_key}",
            params={"ids": ",".join(ids), "format": image_format},
        )
        if data.get("err"):
            raise FigmaAPIError(f"Image export failed: {data['err']}", data.get("status"))

        images = data.get("images") or {}
        urls = {node_id: url for node_id, url in images.items() if url}
        logger.debug(f"Resolved {len(urls)}/{len(ids)} image URLs")
        return urls
