import logging
import os
from typing import Any, Optional

import streamlit as st
from streamlit.errors import StreamlitAPIException

DEFAULT_DOG_API_BASE = "https://dog.ceo/api"
DEFAULT_TIMEOUT = 10
DEFAULT_IMAGE_COUNT = 8
DEFAULT_LOG_LEVEL = "INFO"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def _secret(key: str) -> Optional[Any]:
    # no secrets.toml -> treat as unset
    try:
        if key in st.secrets and st.secrets[key]:
            return st.secrets[key]
    except (FileNotFoundError, StreamlitAPIException):
        return None
    return None


def get_setting(key: str, default: Any) -> Any:
    # 1) 환경변수  2) secrets  3) 기본값
    v = os.environ.get(key, "").strip()
    if v:
        return v
    v = _secret(key)
    if v is not None:
        return v
    return default


def _number(key: str, default, cast):
    raw = get_setting(key, default)
    try:
        value = cast(raw)
    except (TypeError, ValueError):
        value = None
    if value is None or value <= 0:
        logger.warning("Invalid %s=%r; using default %r", key, raw, default)
        return default
    return value


def dog_api_base() -> str:
    return str(get_setting("DOG_API_BASE", DEFAULT_DOG_API_BASE)).rstrip("/")


def request_timeout() -> float:
    return _number("DOG_API_TIMEOUT", float(DEFAULT_TIMEOUT), float)


def image_count() -> int:
    return _number("DOG_IMAGE_COUNT", DEFAULT_IMAGE_COUNT, int)


def configure_logging() -> None:
    level = str(get_setting("DOG_VIEWER_LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
