import streamlit as st
from typing import Callable, Optional

from services.dog_service import DogImage
from utils.breeds import ALL_BREEDS, breed_label


def dog_card(image: DogImage):
    with st.container(border=True):
        st.image(image.url, use_container_width=True)
        st.markdown(f":blue-background[{breed_label(image.breed)}]")


def dog_grid(images, per_row: int = 4):
    cols = st.columns(per_row)
    for i, img in enumerate(images):
        with cols[i % per_row]:
            dog_card(img)


def results_summary(count: int, search_text: str, breed_filter: str):
    parts = [f"Showing {count} dogs"]
    if breed_filter != ALL_BREEDS:
        parts.append(f":gray-background[Breed: {breed_filter.replace('/', ' - ', 1)}]")
    st.markdown(" ".join(parts))
    if search_text:
        # 사용자 입력은 markdown 으로 해석하지 않음
        st.text(f'Filtered by: "{search_text}"')


def empty_state(on_clear: Optional[Callable[[], None]] = None):
    with st.container(border=True):
        st.markdown("No dogs found matching your search.")
        st.button("Clear Search", on_click=on_clear)
