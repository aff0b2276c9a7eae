"""
Tests for the MCP tool layer.

Tests server tools with the HTTP layer mocked:
- Tool registration and names
- Text payloads for success, not-found and resolution failures
"""

import asyncio
from unittest.mock import patch

from louvre_mcp import LouvreCollection
from louvre_mcp.errors import FetchError
from louvre_mcp.server import (
    artwork_detail_text,
    artwork_images_text,
    get_artwork_images,
    mcp,
    search_text,
)


def fetch_error():
    return FetchError("https://collections.louvre.fr/ark:/53355/x.json", ConnectionError("boom"))


class TestRegistration:
    """Test suite for tool registration."""

    def test_tool_names(self):
        """Test the three tools are exposed under their public names."""
        tools = asyncio.run(mcp.list_tools())
        assert {tool.name for tool in tools} == {
            "get-artwork-detail",
            "get-artwork-images",
            "search-artwork",
        }


class TestToolText:
    """Test suite for the text produced by each tool."""

    def test_detail(self, sample_api_payload):
        """Test the detail tool renders the resolved record."""
        with patch.object(LouvreCollection, "fetch_json", return_value=sample_api_payload):
            text = artwork_detail_text("cl010062370")
        assert "Title: Vénus de Milo" in text

    def test_detail_resolution_failure(self):
        """Test a resolution failure becomes a failure message, not an exception."""
        with patch.object(LouvreCollection, "fetch_json", side_effect=fetch_error()), \
                patch.object(LouvreCollection, "fetch_html", side_effect=fetch_error()):
            text = artwork_detail_text("x")
        assert text.startswith("Failed to retrieve the artwork with ID x")

    def test_images_not_found_is_text(self):
        """Test an artwork without images renders an informative message."""
        with patch.object(LouvreCollection, "fetch_json", return_value={"id": "cl1"}), \
                patch.object(LouvreCollection, "fetch_html", return_value="<html><body></body></html>"):
            text = artwork_images_text("cl1")
        assert "no images for artwork cl1" in text

    def test_images_async_tool(self, sample_api_payload):
        """Test the async tool wrapper returns the selected image."""
        with patch.object(LouvreCollection, "fetch_json", return_value=sample_api_payload):
            text = asyncio.run(get_artwork_images("cl010062370", position=1))
        assert "position 1" in text
        assert "0000776011_OG.JPG" in text

    def test_images_markdown(self, sample_api_payload):
        """Test markdown format renders image links."""
        with patch.object(LouvreCollection, "fetch_json", return_value=sample_api_payload):
            text = artwork_images_text("cl010062370", type="thumbnail", format="markdown")
        assert "![Vénus de Milo (thumbnail 0)](" in text

    def test_search_blank_query(self):
        """Test a blank search asks for a query."""
        assert search_text("") == "Please provide a search query to find artwork in the Louvre"

    def test_search_failure(self):
        """Test a failed search request renders a failure message."""
        with patch.object(LouvreCollection, "fetch_html", side_effect=fetch_error()):
            text = search_text("venus")
        assert text.startswith('Failed to search the Louvre collection for "venus"')

    def test_search_results(self, search_page_html):
        """Test search results are rendered."""
        with patch.object(LouvreCollection, "fetch_html", return_value=search_page_html):
            text = search_text("venus", 2)
        assert "page 2 of 3, 42 results" in text
