# ABOUTME: Export output package.
# ABOUTME: Exports storage layout and image resolution functions.

from .images import download_file, image_path, resolve_images
from .storage import ExportStorage, save_document_json

__all__ = ["ExportStorage", "save_document_json", "download_file", "image_path", "resolve_images"]
