"""
Normalization of raw artwork payloads into :class:`ArtworkRecord`.

Two payload families arrive here:
- ``api``: the typed JSON of ``/ark:/53355/<id>.json`` (``creator`` is a list
  of attributions, ``dimension`` a list of measurements, ``image`` a list of
  ``urlImage``/``urlThumbnail`` descriptors, or sometimes a mapping of
  named images)
- ``html``: dicts assembled from scraped markup (search cards, detail page
  images)

Every image URL is made absolute here, once, so nothing downstream needs to
look at URL shape again.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import urljoin

from .constants import BASE_URL, UNSPECIFIED_TYPE
from .models import ArtworkRecord, ImageEntry

logger = logging.getLogger(__name__)

# Alternate identifier keys per source, tried after "id"
ALTERNATE_ID_KEYS = {
    "api": ("ark", "arkId"),
    "html": ("href",),
}

IMAGE_URL_KEYS = ("url", "urlImage", "urlThumbnail")


def _as_text(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip()


def _first_text(raw: Dict[str, Any], *keys: str) -> str:
    for key in keys:
        text = _as_text(raw.get(key))
        if text:
            return text
    return ""


def _join_labels(items: Any, key: str) -> str:
    """Join a list of strings or of dicts carrying ``key`` with '; '."""
    if not isinstance(items, list):
        return _as_text(items)
    labels = []
    for item in items:
        label = _as_text(item.get(key)) if isinstance(item, dict) else _as_text(item)
        if label:
            labels.append(label)
    return "; ".join(labels)


def _trailing_segment(value: str) -> str:
    return value.rstrip("/").split("/")[-1]


def resolve_identifier(raw: Dict[str, Any], source: str, default_id: Optional[str] = None) -> Tuple[str, str]:
    """Return ``(id, ark)`` for a payload.

    ``id`` wins; otherwise the source's alternate keys are tried, taking the
    trailing path segment of ark/href values; ``default_id`` comes last.
    """
    ark = _first_text(raw, "ark", "arkId")
    artwork_id = _as_text(raw.get("id"))
    if not artwork_id:
        keys = [key for part in source.split("+") for key in ALTERNATE_ID_KEYS.get(part, ())]
        for key in keys:
            value = _as_text(raw.get(key))
            if value:
                artwork_id = _trailing_segment(value)
                break
    if not artwork_id and default_id:
        artwork_id = default_id
    return artwork_id, ark


def absolute_url(url: str) -> str:
    """Resolve relative and root-relative URLs against the collection origin."""
    return urljoin(BASE_URL + "/", url)


def _image_from_descriptor(descriptor: Any, position: int, image_type: str) -> Optional[ImageEntry]:
    if isinstance(descriptor, str):
        url = descriptor.strip()
        copyright_ = ""
    elif isinstance(descriptor, dict):
        url = _first_text(descriptor, *IMAGE_URL_KEYS)
        copyright_ = _as_text(descriptor.get("copyright"))
    else:
        return None
    if not url:
        return None
    return ImageEntry(
        position=position,
        url=absolute_url(url),
        type=image_type or UNSPECIFIED_TYPE,
        copyright=copyright_,
    )


def _explicit_position(element: Dict[str, Any]) -> Optional[int]:
    position = element.get("position")
    if isinstance(position, bool):
        return None
    if isinstance(position, int):
        return position
    if isinstance(position, str) and position.strip().lstrip("-").isdigit():
        return int(position)
    return None


def _images_from_list(items: Iterable[Any]) -> List[ImageEntry]:
    images = []
    for index, element in enumerate(items):
        position = index
        image_type = UNSPECIFIED_TYPE
        if isinstance(element, dict):
            explicit = _explicit_position(element)
            if explicit is not None:
                position = explicit
            image_type = _as_text(element.get("type")) or UNSPECIFIED_TYPE
        entry = _image_from_descriptor(element, position, image_type)
        if entry is None:
            logger.debug(f"Dropping unusable image entry at index {index}: {element!r}")
            continue
        images.append(entry)
    return images


def _images_from_mapping(mapping: Dict[str, Any]) -> List[ImageEntry]:
    images = []
    for index, (key, descriptor) in enumerate(mapping.items()):
        entry = _image_from_descriptor(descriptor, index, _as_text(key))
        if entry is None:
            logger.debug(f"Dropping unusable image entry {key!r}")
            continue
        images.append(entry)
    return images


def normalize_images(value: Any) -> Tuple[ImageEntry, ...]:
    """Turn a raw ``image`` field (list or keyed mapping) into image entries."""
    if isinstance(value, list):
        return tuple(_images_from_list(value))
    if isinstance(value, dict):
        return tuple(_images_from_mapping(value))
    if value:
        logger.debug(f"Ignoring image field of type {type(value).__name__}")
    return ()


def normalize(raw: Dict[str, Any], source: str = "api", default_id: Optional[str] = None) -> ArtworkRecord:
    """Build an :class:`ArtworkRecord` from a raw payload.

    Args:
        raw: Decoded JSON object or a dict assembled from scraped HTML.
        source: ``"api"``, ``"html"`` or ``"api+html"``; selects the
            alternate identifier keys. Recorded on the result.
        default_id: Identifier to use when the payload carries none.

    Returns:
        The normalized record. A record without images is valid.

    Raises:
        ValueError: If no identifier can be found.
    """
    if not isinstance(raw, dict):
        raw = {}

    artwork_id, ark = resolve_identifier(raw, source, default_id)
    if not artwork_id:
        raise ValueError(f"Cannot normalize {source} payload without an identifier")

    date = _first_text(raw, "date", "displayDateCreated")
    if not date and isinstance(raw.get("dateCreated"), list):
        date = next(
            (_as_text(d.get("text")) for d in raw["dateCreated"] if isinstance(d, dict) and d.get("text")), ""
        )

    location = ", ".join(
        part for part in (_as_text(raw.get("currentLocation")), _as_text(raw.get("room"))) if part
    )

    record = ArtworkRecord(
        id=artwork_id,
        ark=ark,
        title=_as_text(raw.get("title")),
        artist=_join_labels(raw.get("creator"), "label") or _as_text(raw.get("artist")),
        date=date,
        medium=_first_text(raw, "medium", "materialsAndTechniques"),
        dimensions=_as_text(raw.get("dimensions")) or _join_labels(raw.get("dimension"), "displayDimension"),
        description=_as_text(raw.get("description")),
        location=location,
        images=normalize_images(raw.get("image")),
        source=source,
    )
    logger.debug(f"Normalized {source} payload for {artwork_id} ({len(record.images)} images)")
    return record
