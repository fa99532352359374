# ABOUTME: figma-markdown exports Figma frames to Markdown documents.
# ABOUTME: See exporter.export_document for the main entry point.

__version__ = "0.1.0"
