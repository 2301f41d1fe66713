import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

import config
from utils.breeds import breed_tokens, derive_breed

MAX_RANDOM_IMAGES = 50  # dog.ceo 한 번에 최대 50장


class DogApiError(Exception):
    pass


class CatalogUnavailable(DogApiError):
    """Breed list could not be fetched or parsed."""


class ImageFetchError(DogApiError):
    """Random or per-breed image list could not be fetched or parsed."""


@dataclass(frozen=True)
class DogImage:
    url: str
    breed: str


def _get_message(path: str, base: Optional[str], timeout: Optional[float]) -> Any:
    base = base or config.dog_api_base()
    timeout = timeout or config.request_timeout()
    r = requests.get(f"{base}/{path}", timeout=timeout)
    r.raise_for_status()
    # status 필드는 보지 않음
    return r.json()["message"]


def _url_list(message: Any) -> List[str]:
    if not isinstance(message, list) or not all(isinstance(u, str) for u in message):
        raise ImageFetchError(f"unexpected image list payload: {type(message).__name__}")
    return message


def load_breeds(base: Optional[str] = None, timeout: Optional[float] = None) -> List[str]:
    try:
        message = _get_message("breeds/list/all", base, timeout)
    except (requests.RequestException, ValueError, KeyError, TypeError) as e:
        raise CatalogUnavailable(f"breed list request failed: {e}") from e

    if not isinstance(message, dict):
        raise CatalogUnavailable(f"unexpected breed list payload: {type(message).__name__}")
    catalog: Dict[str, List[str]] = {}
    for breed, subs in message.items():
        if not isinstance(subs, list) or not all(isinstance(s, str) for s in subs):
            raise CatalogUnavailable(f"unexpected sub-breed list for {breed!r}")
        catalog[breed] = subs
    return breed_tokens(catalog)


def fetch_random(count: int, base: Optional[str] = None, timeout: Optional[float] = None) -> List[DogImage]:
    count = max(1, min(int(count), MAX_RANDOM_IMAGES))
    try:
        message = _get_message(f"breeds/image/random/{count}", base, timeout)
    except (requests.RequestException, ValueError, KeyError, TypeError) as e:
        raise ImageFetchError(f"random image request failed: {e}") from e
    return [DogImage(url=u, breed=derive_breed(u)) for u in _url_list(message)]


def fetch_by_breed(
    breed: str,
    count: int,
    base: Optional[str] = None,
    timeout: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> List[DogImage]:
    try:
        message = _get_message(f"breed/{breed}/images", base, timeout)
    except (requests.RequestException, ValueError, KeyError, TypeError) as e:
        raise ImageFetchError(f"image request for {breed!r} failed: {e}") from e

    urls = _url_list(message)
    picked = (rng or random).sample(urls, min(max(0, int(count)), len(urls)))
    return [DogImage(url=u, breed=breed) for u in picked]
