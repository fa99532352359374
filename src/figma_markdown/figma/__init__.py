# ABOUTME: Figma API integration package.
# ABOUTME: Exports the REST client and its error type.

from .client import FigmaAPIError, FigmaClient

__all__ = ["FigmaAPIError", "FigmaClient"]
