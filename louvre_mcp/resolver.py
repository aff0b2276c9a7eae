"""
Artwork resolution mixin.

Resolves an identifier into one :class:`ArtworkRecord` with a two-step
pipeline:
1. Structured JSON from ``/ark:/53355/<id>.json`` (authoritative metadata)
2. Image scraping of the artwork's own HTML page, only when step 1 failed or
   produced no images

Image presence, not HTTP success, decides whether step 2 runs.
"""

import logging
from typing import Any, Dict, Optional

from .constants import API_PATH
from .errors import ExtractionError, FetchError, ResolutionError
from .extract import extract_page_images
from .models import ArtworkRecord
from .normalize import normalize

logger = logging.getLogger(__name__)


def clean_identifier(artwork_id: str) -> str:
    """Reduce an identifier to its trailing segment.

    Accepts ``cl010062370``, ``ark:/53355/cl010062370`` or a full collection
    URL.

    Example:
        >>> clean_identifier("https://collections.louvre.fr/ark:/53355/cl010062370")
        'cl010062370'
    """
    return (artwork_id or "").strip().split("?")[0].rstrip("/").split("/")[-1]


def needs_image_fallback(record: Optional[ArtworkRecord]) -> bool:
    """Whether the HTML page must be scraped for images."""
    return record is None or not record.images


class ResolverMixin:
    """Mixin resolving identifiers into artwork records.

    Requires ``fetch_json`` and ``fetch_html`` from :class:`HttpFetcher`.
    """

    def detail_path(self, artwork_id: str) -> str:
        return f"/{API_PATH}/{artwork_id}"

    def resolve(self, artwork_id: str) -> ArtworkRecord:
        """Resolve an artwork identifier into a normalized record.

        Args:
            artwork_id: Bare identifier, ark identifier or collection URL.

        Returns:
            The record from the JSON endpoint when it lists images; otherwise
            the same record (or an empty one when the JSON fetch failed)
            carrying the images scraped from the detail page.

        Raises:
            ResolutionError: If the identifier is blank, or if both the JSON
                endpoint and the HTML page failed.
        """
        artwork_id = clean_identifier(artwork_id)
        if not artwork_id:
            raise ResolutionError("", ValueError("empty artwork identifier"))

        path = self.detail_path(artwork_id)

        # --- 1. Structured source ---
        payload: Dict[str, Any] = {}
        record: Optional[ArtworkRecord] = None
        api_error: Optional[Exception] = None
        try:
            data = self.fetch_json(path)
            payload = data if isinstance(data, dict) else {}
            record = normalize(payload, "api", default_id=artwork_id)
        except FetchError as e:
            api_error = e
            logger.warning(f"JSON endpoint unavailable for {artwork_id}: {e}")

        if not needs_image_fallback(record):
            logger.info(f"Resolved {artwork_id} from JSON ({len(record.images)} images)")
            return record

        # --- 2. HTML fallback for images ---
        if record is not None:
            logger.info(f"No images in JSON for {artwork_id}, scraping detail page...")
        try:
            page_images = extract_page_images(self.fetch_html(path))
        except (FetchError, ExtractionError) as e:
            if record is not None:
                logger.warning(f"Image fallback failed for {artwork_id}, returning record without images: {e}")
                return record
            logger.error(f"Both sources failed for {artwork_id}")
            raise ResolutionError(artwork_id, api_error, e) from e

        source = "api+html" if record is not None else "html"
        merged = dict(payload, image=page_images)
        record = normalize(merged, source, default_id=artwork_id)
        logger.info(f"Resolved {artwork_id} via {source} ({len(record.images)} images)")
        return record
