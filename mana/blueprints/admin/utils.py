from urllib.parse import urlparse

from flask import request

from ...i18n import supported_locales


def form_text(name: str) -> str:
    return (request.form.get(name) or "").strip()


def form_localized(prefix: str) -> dict:
    """``title_en``, ``title_fr`` ... posted fields as one locale map."""
    return {code: form_text(f"{prefix}_{code}") for code in supported_locales()}


def safe_next(target: str | None) -> str | None:
    # same-site paths only; browsers read a backslash as "/"
    if not target or "\\" in target or not target.startswith("/") or target.startswith("//"):
        return None
    parts = urlparse(target)
    if parts.scheme or parts.netloc:
        return None
    return target
