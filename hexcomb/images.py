# hexcomb/images.py
from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import Optional

import requests
from PIL import Image, UnidentifiedImageError

log = logging.getLogger(__name__)

IMAGE_TIMEOUT = float(os.environ.get("HEXCOMB_IMAGE_TIMEOUT", "10"))


def _is_remote(ref: str) -> bool:
    return ref.startswith(("http://", "https://"))


def _fetch(url: str, timeout: float) -> bytes:
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp.content


def load_image(ref: Optional[str], *, timeout: float = IMAGE_TIMEOUT) -> Optional[Image.Image]:
    """
    Image reference (local path or http(s) URL) -> RGBA image.
    Returns None when the reference is empty or cannot be loaded; callers
    paint the fallback glyph instead.
    """
    if not ref:
        return None
    try:
        source = io.BytesIO(_fetch(ref, timeout)) if _is_remote(ref) else Path(ref).expanduser()
        with Image.open(source) as img:
            return img.convert("RGBA")
    except requests.RequestException as e:
        log.warning("image fetch failed for %s: %s", ref, e)
        return None
    except (OSError, UnidentifiedImageError) as e:
        log.warning("image load failed for %s: %s", ref, e)
        return None
