from concurrent.futures import ThreadPoolExecutor, wait

import streamlit as st

import config
from state import ViewController
from ui.components import dog_grid, empty_state, results_summary
from utils.breeds import ALL_BREEDS, breed_label

st.set_page_config(page_title="Dog API Viewer", page_icon="🐕", layout="wide")
config.configure_logging()

CATALOG_POLL_SECONDS = 0.5


# =========================================================
# Session: controller + 최초 로딩 (견종 목록 / 랜덤 이미지 동시에)
# =========================================================
def get_controller() -> ViewController:
    if "controller" not in st.session_state:
        controller = ViewController()
        executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="dog-mount")
        breeds_future, images_future = controller.mount(executor)
        executor.shutdown(wait=False)
        st.session_state["controller"] = controller
        st.session_state["breeds_future"] = breeds_future
        st.session_state["images_future"] = images_future
    return st.session_state["controller"]


controller = get_controller()
state = controller.state

if state.is_initial_loading:
    # 견종 목록은 기다리지 않음: 도착하면 watch_catalog 가 rerun
    with st.spinner("Loading adorable dogs..."):
        wait([st.session_state["images_future"]])


@st.fragment(run_every=CATALOG_POLL_SECONDS)
def watch_catalog():
    if st.session_state["breeds_future"].done():
        st.rerun()


# =========================================================
# Callbacks: 기록만 하고 fetch 는 본문에서 (spinner/disabled 표시)
# =========================================================
def on_breed_change():
    controller.set_breed_filter(st.session_state["breed_filter"])
    st.session_state["pending_fetch"] = True


def on_refresh():
    st.session_state["pending_fetch"] = True


def on_clear_search():
    st.session_state["search_text"] = ""
    controller.clear_search()


def option_label(token: str) -> str:
    return "All Breeds" if token == ALL_BREEDS else breed_label(token)


# =========================================================
# Page
# =========================================================
pending_fetch = st.session_state.pop("pending_fetch", False)

st.title("🐕 Dog API Viewer")
st.caption("Discover amazing dog breeds from around the world")

with st.container(border=True):
    c1, c2, c3 = st.columns([3, 2, 1], vertical_alignment="bottom")
    with c1:
        search = st.text_input("Search", placeholder="Search by breed name...", key="search_text")
        controller.set_search_text(search)
    with c2:
        st.selectbox(
            "Breed",
            options=controller.breed_options(),
            format_func=option_label,
            key="breed_filter",
            on_change=on_breed_change,
        )
    with c3:
        st.button(
            "🔄 Refresh",
            on_click=on_refresh,
            disabled=pending_fetch or state.is_refreshing,
            use_container_width=True,
        )

if not st.session_state["breeds_future"].done():
    watch_catalog()

if pending_fetch:
    with st.spinner("Fetching dogs..."):
        controller.refresh()
    st.rerun()

visible = controller.visible_images
results_summary(len(visible), state.search_text, state.breed_filter)

if visible:
    dog_grid(visible, per_row=4)
else:
    empty_state(on_clear=on_clear_search)

st.divider()
st.caption("Powered by [Dog CEO API](https://dog.ceo/dog-api/)")
