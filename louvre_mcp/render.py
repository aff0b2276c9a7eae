"""
Text rendering of records, image selections and search pages.

One renderer serves every presentation mode:
- ``plain``: one ``Type/Position/URL`` line per image
- ``markdown``: ``![alt](url)`` lines that markdown-capable clients display
"""

from typing import List

from .models import ArtworkRecord, GroupedImages, ImageEntry, NotFound, SearchResults, SelectionResult, SingleImage

PLAIN = "plain"
MARKDOWN = "markdown"
MODES = (PLAIN, MARKDOWN)


def _check_mode(mode: str) -> None:
    if mode not in MODES:
        raise ValueError(f"Unknown presentation mode {mode!r}, expected one of {MODES}")


def render_image(image: ImageEntry, mode: str = PLAIN, alt: str = "") -> str:
    if mode == MARKDOWN:
        label = f"{alt} ({image.type} {image.position})" if alt else f"{image.type} {image.position}"
        return f"![{label}]({image.url})"
    line = f"Type: {image.type}, Position: {image.position}, URL: {image.url}"
    if image.copyright:
        line += f", Copyright: {image.copyright}"
    return line


def _record_lines(record: ArtworkRecord, mode: str = PLAIN) -> List[str]:
    lines = [
        f"Title: {record.title}",
        f"Artist: {record.artist}",
        f"Date: {record.date}",
        f"Medium: {record.medium}",
        f"Dimensions: {record.dimensions}",
    ]
    if record.location:
        lines.append(f"Location: {record.location}")
    lines.append(f"Description: {record.description}")
    if mode == MARKDOWN:
        lines.extend(render_image(img, mode, record.title) for img in record.images)
    else:
        lines.append(f"Image URLs: {', '.join(img.url for img in record.images)}")
    lines.append(f"URL: {record.canonical_url}")
    return lines


def render_detail(record: ArtworkRecord, mode: str = PLAIN) -> str:
    _check_mode(mode)
    header = f"Here are the details for the artwork with ID {record.id}:"
    return "\n".join([header] + _record_lines(record, mode))


def render_selection(record: ArtworkRecord, result: SelectionResult, mode: str = PLAIN) -> str:
    """Render the outcome of :func:`louvre_mcp.images.select_images`."""
    _check_mode(mode)
    if isinstance(result, NotFound):
        return f"Failed to find images: {result.reason}"

    if isinstance(result, SingleImage):
        image = result.image
        return (
            f"Here is the image at position {image.position} for the artwork with ID {record.id}:\n"
            f"{render_image(image, mode, record.title)}"
        )

    if isinstance(result, GroupedImages):
        if not result.matched_type:
            available = next(iter(result.groups), "")
            header = (
                f"No {result.requested_type} images for the artwork with ID {record.id}; "
                f"showing {available} images instead:"
            )
        elif result.requested_type == "all":
            header = f"Here are the images for the artwork with ID {record.id}:"
        else:
            header = f"Here are the images for the artwork with ID {record.id} and type {result.requested_type}:"
        lines = [
            render_image(image, mode, record.title)
            for images in result.groups.values()
            for image in images
        ]
        return "\n".join([header] + lines)

    raise TypeError(f"Unknown selection result: {result!r}")


def render_search(results: SearchResults, mode: str = PLAIN) -> str:
    _check_mode(mode)
    if results.needs_query:
        return "Please provide a search query to find artwork in the Louvre"

    if not results.records:
        return f'No artworks found for "{results.query}" in the Louvre (page {results.page}).'

    header = (
        f'Here are the search results for "{results.query}" in the Louvre in Paris '
        f"(page {results.page} of {results.total_pages}, {results.total_results} results):"
    )
    blocks = [
        "\n".join([f"ID: {record.id}"] + _record_lines(record, mode))
        for record in results.records
    ]
    return "\n\n".join([header] + blocks)
