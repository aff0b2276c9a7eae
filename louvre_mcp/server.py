import asyncio
import logging
from typing import Literal, Optional

from mcp.server.fastmcp import FastMCP

from . import LouvreCollection
from .errors import LouvreError, ResolutionError
from .render import render_detail, render_search, render_selection

logger = logging.getLogger(__name__)

mcp = FastMCP("louvreMCP")


def artwork_detail_text(id: str) -> str:
    with LouvreCollection() as collection:
        try:
            record = collection.resolve(id)
        except ResolutionError as e:
            return f"Failed to retrieve the artwork with ID {id}: {e}"
    return render_detail(record)


def artwork_images_text(id: str, type: Optional[str] = None, position: Optional[int] = None,
                        format: str = "plain") -> str:
    with LouvreCollection() as collection:
        try:
            record, result = collection.images(id, type=type, position=position)
        except ResolutionError as e:
            return f"Failed to retrieve images for the artwork with ID {id}: {e}"
    return render_selection(record, result, mode=format)


def search_text(query: str, page: Optional[int] = None) -> str:
    with LouvreCollection() as collection:
        try:
            results = collection.search(query, page or 1)
        except LouvreError as e:
            logger.error(f"Search failed for {query!r}: {e}")
            return f'Failed to search the Louvre collection for "{query}": {e}'
    return render_search(results)


@mcp.tool(name="get-artwork-detail", description="get details for an artwork in the Louvre")
async def get_artwork_detail(id: str) -> str:
    """
    id: The ID of the artwork (e.g. cl010062370 or ark:/53355/cl010062370)
    """
    return await asyncio.to_thread(artwork_detail_text, id)


@mcp.tool(name="get-artwork-images", description="get images for an artwork in the Louvre")
async def get_artwork_images(
    id: str,
    type: Optional[Literal["thumbnail", "full", "all"]] = None,
    position: Optional[int] = None,
    format: Literal["plain", "markdown"] = "plain",
) -> str:
    """
    id: The ID of the artwork
    type: The type of image to retrieve
    position: The position of the image to retrieve
    format: plain text lines, or markdown image links
    """
    return await asyncio.to_thread(artwork_images_text, id, type, position, format)


@mcp.tool(name="search-artwork", description="search for an artwork in the Louvre")
async def search_artwork(query: str, page: Optional[int] = None) -> str:
    """
    query: What do you want to search for?
    page: The page number of the search results
    """
    return await asyncio.to_thread(search_text, query, page)


def main():
    logger.info("Louvre MCP Server running on stdio")
    mcp.run()


if __name__ == "__main__":
    main()
