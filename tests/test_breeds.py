"""Tests for breed token derivation, URL breed inference and local filtering."""

import pytest

from services.dog_service import DogImage
from utils.breeds import breed_label, breed_tokens, derive_breed, filter_images


# -----------------------------------------------------------------------------
# breed_tokens
# -----------------------------------------------------------------------------

class TestBreedTokens:
    def test_sub_breeds_expand_and_sort(self):
        catalog = {"pug": [], "hound": ["blood", "afghan"]}
        assert breed_tokens(catalog) == ["hound/afghan", "hound/blood", "pug"]

    def test_empty_catalog(self):
        assert breed_tokens({}) == []

    def test_tokens_use_payload_names_verbatim(self):
        catalog = {"terrier": ["yorkshire", "irish"], "akita": [], "bulldog": ["french"]}
        tokens = breed_tokens(catalog)

        assert tokens == sorted(tokens)
        assert len(tokens) == len(set(tokens))
        for token in tokens:
            breed, _, sub = token.partition("/")
            assert breed in catalog
            if sub:
                assert sub in catalog[breed]
            else:
                assert catalog[breed] == []


# -----------------------------------------------------------------------------
# derive_breed
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://images.dog.ceo/breeds/hound/afghan/n02088094_1234.jpg", "hound/afghan"),
        ("https://images.dog.ceo/breeds/pug/n02110958_1234.jpg", "pug"),
        ("https://images.dog.ceo/breeds/pug/images/n02110958_1234.jpg", "pug"),
        ("https://images.dog.ceo/breeds/hound-afghan/n02088094_1003.jpg", "hound-afghan"),
        ("https://images.dog.ceo/breeds/akita", "akita"),
        ("https://images.dog.ceo/breeds/akita/", "akita"),
    ],
)
def test_derive_breed_from_breeds_segment(url, expected):
    assert derive_breed(url) == expected


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/dogs/pug/1.jpg",
        "https://images.dog.ceo/n02110958_1234.jpg",
        "https://images.dog.ceo/breeds",
        "https://images.dog.ceo/breeds/",
        "",
    ],
)
def test_derive_breed_unknown(url):
    assert derive_breed(url) == "unknown"


def test_derive_breed_ignores_host_named_breeds():
    # only path segments count
    assert derive_breed("https://breeds/pug/1.jpg") == "unknown"


# -----------------------------------------------------------------------------
# filter_images
# -----------------------------------------------------------------------------

IMAGES = [
    DogImage(url="https://images.dog.ceo/breeds/labrador/1.jpg", breed="labrador"),
    DogImage(url="https://images.dog.ceo/breeds/hound/afghan/2.jpg", breed="hound/afghan"),
    DogImage(url="https://images.dog.ceo/breeds/pug/3.jpg", breed="pug"),
]


class TestFilterImages:
    def test_empty_search_is_identity(self):
        assert filter_images(IMAGES, "") == IMAGES

    def test_case_insensitive(self):
        assert filter_images(IMAGES, "LAB") == [IMAGES[0]]

    def test_matches_sub_breed_part(self):
        assert filter_images(IMAGES, "afghan") == [IMAGES[1]]

    def test_matches_slash(self):
        assert filter_images(IMAGES, "hound/") == [IMAGES[1]]

    def test_no_match(self):
        assert filter_images(IMAGES, "poodle") == []

    def test_keeps_order(self):
        assert filter_images(IMAGES, "u") == [IMAGES[1], IMAGES[2]]


# -----------------------------------------------------------------------------
# breed_label
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "token, label",
    [
        ("hound/afghan", "Hound - afghan"),
        ("pug", "Pug"),
        ("unknown", "Unknown"),
        ("", ""),
    ],
)
def test_breed_label(token, label):
    assert breed_label(token) == label
