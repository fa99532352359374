"""Shared fixtures for figma-markdown tests."""

import pytest

from figma_markdown.config import Config


def text_node(node_id, name, text, x=0, y=0):
    return {
        "id": node_id,
        "name": name,
        "type": "TEXT",
        "characters": text,
        "absoluteBoundingBox": {"x": x, "y": y, "width": 100, "height": 20},
    }


def image_node(node_id, name, x=0, y=0, children=None):
    node = {
        "id": node_id,
        "name": name,
        "type": "GROUP",
        "exportSettings": [{"format": "PNG", "suffix": "", "constraint": {"type": "SCALE", "value": 1}}],
        "absoluteBoundingBox": {"x": x, "y": y, "width": 200, "height": 100},
    }
    if children is not None:
        node["children"] = children
    return node


def frame_node(node_id, name, children=None):
    node = {"id": node_id, "name": name, "type": "FRAME"}
    if children is not None:
        node["children"] = children
    return node


class FakeFigmaClient:
    """In-memory stand-in for FigmaClient that records its calls."""

    def __init__(self, document=None, image_urls=None):
        self.document = document or {}
        self.image_urls = image_urls or {}
        self.file_requests = []
        self.image_requests = []

    def get_file(self, file_key):
        self.file_requests.append(file_key)
        return self.document

    def get_image_urls(self, file_key, ids, image_format="png"):
        self.image_requests.append((file_key, list(ids), image_format))
        return {node_id: url for node_id, url in self.image_urls.items() if node_id in ids}


class FakeResponse:
    """Minimal streamed response returned by a patched requests.get."""

    def __init__(self, content=b"", status_error=None, stream_error=None):
        self.content = content
        self.status_error = status_error
        self.stream_error = stream_error

    def raise_for_status(self):
        if self.status_error is not None:
            raise self.status_error

    def iter_content(self, chunk_size=8192):
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i:i + chunk_size]
        if self.stream_error is not None:
            raise self.stream_error


@pytest.fixture
def sample_document():
    """A file response with one page holding two frames and one empty frame."""
    home = frame_node("1:1", "Home Page", [
        text_node("1:2", "Body", "Welcome\u2028home", x=0, y=300),
        image_node("1:3", "Hero", x=0, y=0, children=[text_node("1:4", "Caption", "ignored")]),
        text_node("1:5", "Title", "Hello", x=0, y=100),
    ])
    about = frame_node("2:1", "About/Us", [
        {
            "id": "2:2",
            "name": "Row",
            "type": "GROUP",
            "children": [
                text_node("2:3", "Right", "Right column", x=300, y=50),
                text_node("2:4", "Left", "Left column", x=10, y=50),
            ],
        },
        image_node("2:5", "Logo mark", x=0, y=0),
    ])
    empty = frame_node("3:1", "Empty")
    return {
        "name": "Design",
        "document": {
            "id": "0:0",
            "name": "Document",
            "type": "DOCUMENT",
            "children": [
                {"id": "0:1", "name": "Page 1", "type": "CANVAS", "children": [home, about, empty]},
                {"id": "0:2", "name": "Ignored page", "type": "CANVAS", "children": []},
            ],
        },
    }


@pytest.fixture
def config(tmp_path):
    """Configuration writing into a temporary directory."""
    return Config(
        file_key="FILEKEY",
        output_dir=tmp_path / "output",
        raw_dump_path=tmp_path / "figma.json",
    )
