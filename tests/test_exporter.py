"""Tests for the export run."""

import pytest
import requests

from figma_markdown.exporter import ExportError, export_document, list_frames
from figma_markdown.figma import FigmaAPIError

from conftest import FakeFigmaClient, FakeResponse, frame_node


@pytest.fixture
def served(monkeypatch):
    """Serve image bytes by URL through a patched requests.get."""
    content = {}

    def fake_get(url, timeout=None, stream=False):
        if url not in content:
            raise requests.ConnectionError(f"cannot reach {url}")
        return FakeResponse(content[url])

    monkeypatch.setattr("figma_markdown.export.images.requests.get", fake_get)
    return content


class TestExportDocument:
    """Test export_document end to end with a fake client."""

    def test_writes_frames_and_images(self, config, sample_document, served):
        """Each non-empty frame becomes a Markdown file in the page directory."""
        served["https://img/hero"] = b"hero-png"
        client = FakeFigmaClient(sample_document, image_urls={"1:3": "https://img/hero"})

        summary = export_document(config, client)

        page_path = config.output_dir / "Page_1"
        assert summary.page_path == page_path
        assert summary.page_name == "Page 1"
        assert sorted(p.name for p in page_path.iterdir()) == ["About_Us.md", "Home_Page.md", "images"]

        home = (page_path / "Home_Page.md").read_text(encoding="utf-8")
        assert home == "# Home Page\n\n![Hero](./images/Hero.png)\n\nHello\n\nWelcomehome\n\n"

        about = (page_path / "About_Us.md").read_text(encoding="utf-8")
        assert about == (
            "# About/Us\n\n"
            "![Logo mark](./images/Logo_mark.png)\n\n"
            "Left column\n\n"
            "Right column\n\n"
        )

        assert (page_path / "images" / "Hero.png").read_bytes() == b"hero-png"
        assert not (page_path / "images" / "Logo_mark.png").exists()

    def test_one_image_request_per_frame(self, config, sample_document, served):
        """Frames with images get one batch request; empty frames none."""
        client = FakeFigmaClient(sample_document)

        export_document(config, client)

        assert client.file_requests == ["FILEKEY"]
        assert client.image_requests == [
            ("FILEKEY", ["1:3"], "png"),
            ("FILEKEY", ["2:5"], "png"),
        ]

    def test_summary_counts(self, config, sample_document, served):
        """The summary counts written and skipped frames and downloads."""
        served["https://img/hero"] = b"x"
        client = FakeFigmaClient(sample_document, image_urls={"1:3": "https://img/hero"})

        summary = export_document(config, client)

        assert summary.frames_written == 2
        assert summary.frames_skipped == 1
        assert summary.images_downloaded == 1
        assert summary.image_errors == []

    def test_raw_dump_is_written(self, config, sample_document, served):
        """The fetched document is dumped once with separators stripped."""
        export_document(config, FakeFigmaClient(sample_document))

        dump = config.raw_dump_path.read_text(encoding="utf-8")
        assert "Welcomehome" in dump
        assert "\u2028" not in dump

    def test_empty_frames_create_nothing(self, config):
        """A page of empty frames writes no Markdown and no images directory."""
        document = {"document": {"children": [
            {"name": "Page", "children": [frame_node("1:1", "Empty"), frame_node("1:2", "Blank", [])]},
        ]}}
        client = FakeFigmaClient(document)

        summary = export_document(config, client)

        assert list(summary.page_path.iterdir()) == []
        assert summary.frames_skipped == 2
        assert client.image_requests == []

    def test_page_without_children(self, config):
        """A page with no frames exports nothing."""
        client = FakeFigmaClient({"document": {"children": [{"name": "Page"}]}})

        summary = export_document(config, client)

        assert summary.frames_written == 0

    def test_no_pages_raises(self, config):
        """A document with no pages cannot be exported."""
        with pytest.raises(ExportError):
            export_document(config, FakeFigmaClient({"document": {"children": []}}))

    def test_fetch_failure_propagates(self, config):
        """Document fetch errors abort the run."""
        class FailingClient(FakeFigmaClient):
            def get_file(self, file_key):
                raise FigmaAPIError("403 Forbidden", 403)

        with pytest.raises(FigmaAPIError):
            export_document(config, FailingClient())

        assert not config.output_dir.exists()

    def test_image_failure_keeps_going(self, config, sample_document, served):
        """A broken download is recorded and the frame is still written."""
        client = FakeFigmaClient(sample_document, image_urls={"1:3": "https://img/broken"})

        summary = export_document(config, client)

        assert summary.frames_written == 2
        assert [e["id"] for e in summary.image_errors] == ["1:3"]
        home = (summary.page_path / "Home_Page.md").read_text(encoding="utf-8")
        assert "![Hero](./images/Hero.png)" in home

    def test_strict_images_aborts(self, config, sample_document, served):
        """With strict_images a broken download aborts the run."""
        config.strict_images = True
        client = FakeFigmaClient(sample_document, image_urls={"1:3": "https://img/broken"})

        with pytest.raises(requests.ConnectionError):
            export_document(config, client)


class TestListFrames:
    """Test list_frames."""

    def test_lists_first_page_frames(self, config, sample_document):
        """Returns id and name of each frame of the first page."""
        frames = list_frames(config, FakeFigmaClient(sample_document))

        assert frames == [
            {"id": "1:1", "name": "Home Page"},
            {"id": "2:1", "name": "About/Us"},
            {"id": "3:1", "name": "Empty"},
        ]
