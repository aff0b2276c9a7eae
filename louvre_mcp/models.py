"""
Data model for resolved Louvre artworks.

Records are produced only by :func:`louvre_mcp.normalize.normalize` and are
frozen: a resolution call builds a fresh record and nothing mutates it after.
Image selection results are a small tagged union (``SingleImage``,
``GroupedImages``, ``NotFound``) consumed by the renderer.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Tuple, Union

from .constants import API_PATH, BASE_URL, RESULTS_PER_PAGE, UNSPECIFIED_TYPE


def canonical_url(artwork_id: str) -> str:
    """Build the collection detail-page URL for an identifier."""
    return f"{BASE_URL}/{API_PATH}/{artwork_id}"


@dataclass(frozen=True)
class ImageEntry:
    """One image of an artwork. ``url`` is always absolute."""

    position: int
    url: str
    type: str = UNSPECIFIED_TYPE
    copyright: str = ""


@dataclass(frozen=True)
class ArtworkRecord:
    """Canonical artwork record shared by the api and html sources."""

    id: str
    title: str = ""
    artist: str = ""
    date: str = ""
    medium: str = ""
    dimensions: str = ""
    description: str = ""
    location: str = ""
    ark: str = ""
    images: Tuple[ImageEntry, ...] = ()
    source: str = "api"

    @property
    def canonical_url(self) -> str:
        return canonical_url(self.id)


@dataclass(frozen=True)
class SearchResults:
    """One page of search results."""

    query: str
    page: int = 1
    records: Tuple[ArtworkRecord, ...] = ()
    total_results: int = 0

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_results / RESULTS_PER_PAGE)

    @property
    def needs_query(self) -> bool:
        # Blank queries get a prompt for input rather than an error
        return not self.query.strip()


# ====================
# Image selection results
# ====================

@dataclass(frozen=True)
class SingleImage:
    image: ImageEntry
    requested_type: str = ""


@dataclass(frozen=True)
class GroupedImages:
    """Images grouped by type, in type-discovery order.

    ``matched_type`` is False when the requested type had no group and the
    first available group was returned instead.
    """

    groups: Dict[str, Tuple[ImageEntry, ...]] = field(default_factory=dict)
    requested_type: str = "all"
    matched_type: bool = True

    @property
    def image_count(self) -> int:
        return sum(len(images) for images in self.groups.values())


@dataclass(frozen=True)
class NotFound:
    reason: str


SelectionResult = Union[SingleImage, GroupedImages, NotFound]
