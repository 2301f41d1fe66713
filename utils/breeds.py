from typing import Dict, List, Sequence, TypeVar
from urllib.parse import urlsplit

ALL_BREEDS = "all"
UNKNOWN_BREED = "unknown"

T = TypeVar("T")


def breed_tokens(catalog: Dict[str, List[str]]) -> List[str]:
    """Flatten {breed: [sub, ...]} into sorted "breed" / "breed/sub" tokens."""
    tokens = []
    for breed, subs in catalog.items():
        if subs:
            for sub in subs:
                tokens.append(f"{breed}/{sub}")
        else:
            tokens.append(breed)
    return sorted(tokens)


def _is_filename(segment: str) -> bool:
    # n02110958_1234.jpg
    return "." in segment


def derive_breed(url: str) -> str:
    """Infer the breed token from an image URL path.

    .../breeds/hound/afghan/n02088094_1234.jpg -> "hound/afghan"
    .../breeds/pug/n02110958_1234.jpg          -> "pug"
    .../breeds/pug/images/x.jpg                -> "pug"
    """
    segments = [s for s in urlsplit(url).path.split("/") if s]
    if "breeds" not in segments:
        return UNKNOWN_BREED

    i = segments.index("breeds") + 1
    if i >= len(segments):
        return UNKNOWN_BREED

    breed = segments[i]
    sub = segments[i + 1] if i + 1 < len(segments) else None
    if sub and sub != "images" and not _is_filename(sub):
        return f"{breed}/{sub}"
    return breed


def filter_images(images: Sequence[T], search_text: str) -> List[T]:
    needle = (search_text or "").lower()
    return [img for img in images if needle in img.breed.lower()]


def breed_label(token: str) -> str:
    """Display label: "hound/afghan" -> "Hound - afghan"."""
    if not token:
        return token
    return token[0].upper() + token[1:].replace("/", " - ", 1)
