"""Image selection over a resolved artwork record."""

import logging
from typing import Dict, List, Optional

from .models import ArtworkRecord, GroupedImages, ImageEntry, NotFound, SelectionResult, SingleImage

logger = logging.getLogger(__name__)

ALL_TYPES = "all"


def group_by_type(images) -> Dict[str, List[ImageEntry]]:
    """Group images by type, keeping discovery order of types and images."""
    groups: Dict[str, List[ImageEntry]] = {}
    for image in images:
        groups.setdefault(image.type, []).append(image)
    return groups


def _by_position(images: List[ImageEntry]):
    return tuple(sorted(images, key=lambda img: img.position))


def select_images(record: ArtworkRecord, type: Optional[str] = None, position: Optional[int] = None) -> SelectionResult:
    """Answer an image query against a record.

    Rules, in order:
    1. No images at all -> ``NotFound``.
    2. ``position`` given -> the image at that position, whatever ``type``
       says, or ``NotFound``.
    3. ``type`` omitted or "all" -> every type group, original order.
    4. ``type`` present in the record -> that group, sorted by position.
    5. Otherwise -> the first group in discovery order, sorted by position.
       Never an error.
    """
    if not record.images:
        return NotFound(f"no images for artwork {record.id}")

    if position is not None:
        for image in record.images:
            if image.position == position:
                return SingleImage(image, requested_type=type or "")
        return NotFound(f"no image at position {position} for artwork {record.id}")

    groups = group_by_type(record.images)

    if not type or type == ALL_TYPES:
        return GroupedImages(
            groups={key: tuple(images) for key, images in groups.items()},
            requested_type=ALL_TYPES,
        )

    if type in groups:
        return GroupedImages(groups={type: _by_position(groups[type])}, requested_type=type)

    fallback_type = next(iter(groups))
    logger.info(f"No {type!r} images for {record.id}, falling back to {fallback_type!r}")
    return GroupedImages(
        groups={fallback_type: _by_position(groups[fallback_type])},
        requested_type=type,
        matched_type=False,
    )
