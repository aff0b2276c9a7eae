"""
HTML extraction for collections.louvre.fr pages.

This module provides the scraping half of the client:
- Search result cards (identifier, title, author, lazy-loaded thumbnail)
- Result count of a search page
- Every image on an artwork detail page, classified by URL heuristics

Uses BeautifulSoup for HTML parsing. Missing fields degrade to empty strings;
only a missing or blank document raises :class:`ExtractionError`. URLs are
returned exactly as found in the markup; making them absolute is left to
:mod:`louvre_mcp.normalize`.
"""

import logging
import re
from typing import Any, Dict, List

from bs4 import BeautifulSoup

from .constants import (
    CARD_AUTHOR_SELECTOR,
    CARD_TITLE_SELECTOR,
    IMAGE_TYPE_HINTS,
    RESULT_COUNT_SELECTOR,
    SEARCH_CARD_SELECTOR,
    UNKNOWN_TYPE,
)
from .errors import ExtractionError

logger = logging.getLogger(__name__)


def parse_document(html: Any) -> BeautifulSoup:
    """Parse an HTML document.

    Raises:
        ExtractionError: If ``html`` is not text or is blank.
    """
    if isinstance(html, bytes):
        html = html.decode("utf-8", errors="replace")
    if not isinstance(html, str) or not html.strip():
        raise ExtractionError("Empty or missing HTML document")
    return BeautifulSoup(html, "html.parser")


def _get_best_image_src(img_tag) -> str:
    """Get the image source of an img tag.

    Priority: data-src (lazy load) > src. Result grids lazy-load their
    thumbnails, so ``src`` is often a placeholder there.
    """
    return (img_tag.get("data-src") or img_tag.get("src") or "").strip()


def _text(element) -> str:
    return element.get_text(strip=True) if element else ""


def _last_segment(href: str) -> str:
    return href.split("?")[0].rstrip("/").split("/")[-1] if href else ""


def classify_image_url(url: str) -> str:
    """Guess an image type from substrings of its URL.

    "small"/"thumb" -> thumbnail, "large"/"full" -> full, else unknown. This is
    a last-resort heuristic, much weaker than the types the JSON endpoint
    reports.
    """
    lowered = url.lower()
    for needles, image_type in IMAGE_TYPE_HINTS:
        if any(needle in lowered for needle in needles):
            return image_type
    return UNKNOWN_TYPE


def extract_artwork_cards(html: Any) -> List[Dict[str, str]]:
    """Extract the artwork cards of a search result page.

    Returns:
        One dict per card with keys ``id``, ``href``, ``title``, ``author``,
        ``image_url`` and ``image_title``; absent fields are empty strings.
    """
    soup = parse_document(html)
    cards: List[Dict[str, str]] = []

    for card in soup.select(SEARCH_CARD_SELECTOR):
        link = card.find("a")
        href = (link.get("href") or "") if link else ""

        img = card.find("img")
        image_url = _get_best_image_src(img) if img else ""
        image_title = (img.get("title") or "").strip() if img else ""

        title_el = card.select_one(f"{CARD_TITLE_SELECTOR} a") or card.select_one(CARD_TITLE_SELECTOR)

        cards.append({
            "id": _last_segment(href),
            "href": href,
            "title": _text(title_el),
            "author": _text(card.select_one(CARD_AUTHOR_SELECTOR)),
            "image_url": image_url,
            "image_title": image_title,
        })

    logger.debug(f"Extracted {len(cards)} artwork cards")
    return cards


def extract_page_images(html: Any) -> List[Dict[str, Any]]:
    """Extract every image of an artwork detail page.

    Each image gets its discovery index as ``position`` and a type from
    :func:`classify_image_url`. Inline ``data:`` placeholders are skipped and
    repeated URLs are kept once.
    """
    soup = parse_document(html)
    images: List[Dict[str, Any]] = []
    seen = set()

    for img in soup.find_all("img"):
        src = _get_best_image_src(img)
        if not src or src.startswith("data:") or src in seen:
            continue
        seen.add(src)
        images.append({
            "position": len(images),
            "type": classify_image_url(src),
            "url": src,
        })

    logger.debug(f"Found {len(images)} images on detail page")
    return images


def extract_result_count(html: Any) -> int:
    """Parse the total number of results of a search page (0 if unknown)."""
    soup = parse_document(html)
    count_el = soup.select_one(RESULT_COUNT_SELECTOR)
    if not count_el:
        return 0

    # Split on ASCII spaces only: thousands are grouped with (narrow) NBSP
    first_token = count_el.get_text().strip().split(" ")[0]
    digits = re.sub(r"\D", "", first_token)
    return int(digits) if digits else 0
