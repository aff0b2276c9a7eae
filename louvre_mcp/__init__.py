
from .core import HttpFetcher
from .resolver import ResolverMixin
from .search import SearchMixin
from .images import select_images
from .models import ArtworkRecord, ImageEntry, SearchResults, SingleImage, GroupedImages, NotFound
from .errors import LouvreError, FetchError, ExtractionError, ResolutionError

class LouvreCollection(HttpFetcher, ResolverMixin, SearchMixin):
    """
    Facade class combining the collection client functionalities.
    Inherits from:
    - HttpFetcher: Session, URL building, JSON/HTML fetching
    - ResolverMixin: resolve (JSON first, HTML page images as fallback)
    - SearchMixin: search (scraped result grid)
    """

    def images(self, artwork_id: str, type=None, position=None):
        """Resolve an artwork and select its images in one call."""
        record = self.resolve(artwork_id)
        return record, select_images(record, type=type, position=position)
