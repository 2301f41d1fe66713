"""Per-session view state for the dog viewer and the controller that owns it.

The controller is the only writer of ``ViewState``. ``mount`` starts the
catalog load and the first random image load as two independent tasks with
no join between them; this is safe only because they write disjoint fields
(``breeds`` vs ``images`` / ``is_initial_loading``). Keep it that way.
"""

import logging
from concurrent.futures import Executor, Future
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import config
from services import dog_service
from services.dog_service import CatalogUnavailable, DogImage, ImageFetchError
from utils.breeds import ALL_BREEDS, filter_images

logger = logging.getLogger(__name__)


@dataclass
class ViewState:
    breed_filter: str = ALL_BREEDS
    search_text: str = ""
    images: List[DogImage] = field(default_factory=list)
    breeds: List[str] = field(default_factory=list)
    is_refreshing: bool = False
    is_initial_loading: bool = True


class ViewController:
    def __init__(
        self,
        state: Optional[ViewState] = None,
        image_count: Optional[int] = None,
        base: Optional[str] = None,
    ):
        self.state = state or ViewState()
        self.image_count = image_count or config.image_count()
        self.base = base

    # ---------------------------------------------------------
    # Startup
    # ---------------------------------------------------------
    def mount(self, executor: Executor) -> Tuple[Future, Future]:
        """Submit catalog + first image load; returns (breeds, images) futures."""
        breeds_future = executor.submit(self.load_breeds)
        images_future = executor.submit(self._load_images, ALL_BREEDS)
        return breeds_future, images_future

    def load_breeds(self) -> bool:
        try:
            breeds = dog_service.load_breeds(base=self.base)
        except CatalogUnavailable:
            logger.exception("Error fetching breeds; breed filter limited to 'all'")
            self.state.breeds = []
            return False
        self.state.breeds = breeds
        return True

    # ---------------------------------------------------------
    # User actions
    # ---------------------------------------------------------
    def set_breed_filter(self, breed: str) -> None:
        self.state.breed_filter = breed or ALL_BREEDS

    def select_breed(self, breed: str) -> bool:
        self.set_breed_filter(breed)
        return self._load_images(self.state.breed_filter)

    def refresh(self) -> bool:
        return self._load_images(self.state.breed_filter)

    def set_search_text(self, text: str) -> None:
        self.state.search_text = text or ""

    def clear_search(self) -> None:
        self.state.search_text = ""

    # ---------------------------------------------------------
    # Derived view
    # ---------------------------------------------------------
    @property
    def visible_images(self) -> List[DogImage]:
        return filter_images(self.state.images, self.state.search_text)

    def breed_options(self) -> List[str]:
        return [ALL_BREEDS] + list(self.state.breeds)

    # ---------------------------------------------------------
    # Fetch
    # ---------------------------------------------------------
    def _fetch(self, breed_filter: str) -> List[DogImage]:
        if breed_filter == ALL_BREEDS:
            return dog_service.fetch_random(self.image_count, base=self.base)
        return dog_service.fetch_by_breed(breed_filter, self.image_count, base=self.base)

    def _load_images(self, breed_filter: str) -> bool:
        # overlapping calls are not serialized: last response to land wins
        self.state.is_refreshing = True
        try:
            images = self._fetch(breed_filter)
        except ImageFetchError:
            logger.exception("Error fetching images for %r", breed_filter)
            return False
        else:
            self.state.images = images
            logger.debug("Loaded %d images for %r", len(images), breed_filter)
            return True
        finally:
            self.state.is_refreshing = False
            self.state.is_initial_loading = False
