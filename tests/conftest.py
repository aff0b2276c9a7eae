"""
Pytest configuration and shared fixtures.

This module provides common fixtures for all tests:
- Sample JSON payloads shaped like the collection's ``.json`` endpoint
- Sample detail and search page HTML
- A collection client and a helper for mocked HTTP responses
"""

from typing import Any, Dict
from unittest.mock import MagicMock

import pytest
import requests

from louvre_mcp import LouvreCollection
from louvre_mcp.models import ArtworkRecord, ImageEntry


def make_response(json_data: Any = None, text: str = "", status_code: int = 200) -> MagicMock:
    """Build a mock ``requests.Response``."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


@pytest.fixture
def collection():
    """Provide a collection client; network access is always mocked in tests."""
    client = LouvreCollection(timeout=5)
    yield client
    client.close()


@pytest.fixture
def sample_api_payload() -> Dict[str, Any]:
    """Provide a JSON payload with list-shaped images.

    Returns:
        Dictionary mimicking the ``/ark:/53355/<id>.json`` response
    """
    return {
        "id": "cl010062370",
        "arkId": "ark:/53355/cl010062370",
        "title": "Vénus de Milo",
        "creator": [{"label": "Anonyme", "attributionLevel": "Auteur"}],
        "displayDateCreated": "vers 150 - 125 avant J.-C.",
        "materialsAndTechniques": "Marbre de Paros",
        "dimension": [
            {"type": "Hauteur", "displayDimension": "H. : 2,02 m"},
            {"type": "Largeur", "displayDimension": "l. : 0,66 m"},
        ],
        "description": "Statue découverte à Milo en 1820.",
        "currentLocation": "Denon",
        "room": "Salle 345",
        "image": [
            {
                "urlImage": "https://collections.louvre.fr/media/cache/large/0000000021/0000099010/0000776011_OG.JPG",
                "urlThumbnail": "/media/cache/small/0000000021/0000099010/0000776011_OG.JPG",
                "copyright": "© RMN - Grand Palais",
                "type": "full",
                "position": 1,
            },
            {
                "urlImage": "/media/cache/small/0000000021/0000099010/0000776012_OG.JPG",
                "type": "thumbnail",
                "position": 0,
            },
            {
                "urlImage": "/media/cache/large/0000000021/0000099010/0000776013_OG.JPG",
                "type": "full",
                "position": 0,
            },
        ],
    }


@pytest.fixture
def detail_page_html() -> str:
    """Provide an artwork detail page with one lazy and one eager image."""
    return """<html><body>
<header><img src="data:image/gif;base64,R0lGODlhAQABAAAAACw="></header>
<h1>Vénus de Milo</h1>
<div class="notice__media">
  <img src="/media/a-thumb.jpg" alt="vignette">
  <img data-src="/media/cache/large/b.jpg" src="data:image/gif;base64,R0lGODlhAQABAAAAACw=">
  <img src="https://collections.louvre.fr/media/c.png">
  <img src="/media/a-thumb.jpg">
</div>
</body></html>"""


@pytest.fixture
def search_page_html() -> str:
    """Provide a search result page with three cards (one without a link)."""
    return """<html><body>
<div class="search__results__count">42 résultats</div>
<div id="search__grid">
  <div class="card__outer">
    <a href="/ark:/53355/cl010062370"><img data-src="/media/cache/small/venus.jpg" src="/placeholder.gif" title="Vénus de Milo, marbre"></a>
    <div class="card__title"><a href="/ark:/53355/cl010062370">Vénus de Milo</a></div>
    <div class="card__author">Anonyme</div>
  </div>
  <div class="card__outer">
    <a href="/ark:/53355/cl010277627"><img src="/media/cache/small/venus-2.jpg"></a>
    <div class="card__title">Vénus et l'Amour</div>
  </div>
  <div class="card__outer">
    <div class="card__title">Sans lien</div>
  </div>
</div>
</body></html>"""


@pytest.fixture
def record_with_images() -> ArtworkRecord:
    """Provide a record with two full images (out of order) and one thumbnail."""
    return ArtworkRecord(
        id="cl010062370",
        title="Vénus de Milo",
        images=(
            ImageEntry(position=2, type="full", url="https://collections.louvre.fr/media/full-2.jpg"),
            ImageEntry(position=0, type="thumbnail", url="https://collections.louvre.fr/media/thumb-0.jpg"),
            ImageEntry(position=1, type="full", url="https://collections.louvre.fr/media/full-1.jpg"),
        ),
    )


@pytest.fixture
def response_factory():
    """Provide :func:`make_response` to tests."""
    return make_response
