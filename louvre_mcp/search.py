"""
Search mixin for the collection's full-text search page.

The search page has no JSON form, so results are scraped from the rendered
result grid (20 cards per page).
"""

import logging

from .constants import SEARCH_PATH, THUMBNAIL_TYPE
from .extract import extract_artwork_cards, extract_result_count
from .models import SearchResults
from .normalize import normalize

logger = logging.getLogger(__name__)


class SearchMixin:
    """Mixin providing ``search``. Requires ``fetch_html`` from :class:`HttpFetcher`."""

    def search(self, query: str, page: int = 1) -> SearchResults:
        """Search the collection.

        Args:
            query: Free-text query. A blank query returns a result whose
                ``needs_query`` is True, without any request.
            page: 1-based result page; values below 1 are treated as 1.

        Returns:
            One page of partial records (no date, medium or dimensions) with
            the total result count.

        Raises:
            FetchError: If the search page cannot be fetched.
            ExtractionError: If the search page is empty.
        """
        query = (query or "").strip()
        page = max(int(page or 1), 1)
        if not query:
            return SearchResults(query="", page=page)

        html = self.fetch_html(SEARCH_PATH, params={"page": page, "q": query})

        records = []
        for card in extract_artwork_cards(html):
            if not card["id"]:
                logger.debug(f"Skipping card without identifier: {card.get('title')!r}")
                continue
            image = (
                [{"position": 0, "type": THUMBNAIL_TYPE, "url": card["image_url"]}]
                if card["image_url"] else []
            )
            records.append(normalize({
                "id": card["id"],
                "title": card["title"],
                "creator": card["author"],
                "description": card["image_title"],
                "image": image,
            }, "html"))

        total = extract_result_count(html)
        logger.info(f"Search {query!r} page {page}: {len(records)} cards, {total} total results")
        return SearchResults(query=query, page=page, records=tuple(records), total_results=total)
