"""Locale resolution and translation bundles.

Pages live under ``/<locale>/...``. The first path segment decides the active
locale; message bundles are JSON files in ``mana/translations`` keyed by
namespace (``"Nav"``, ``"Contact"`` ...). Missing or empty strings fall back to
the default locale, then to the key itself.
"""
import json
import logging
from functools import lru_cache
from pathlib import Path

from flask import abort, current_app, g, request, session

log = logging.getLogger(__name__)

TRANSLATIONS_DIR = Path(__file__).parent / "translations"
DEFAULT_LOCALE = "en"


def supported_locales() -> list[str]:
    return list(current_app.config.get("LANGUAGES", [DEFAULT_LOCALE]))


def default_locale() -> str:
    return current_app.config.get("BABEL_DEFAULT_LOCALE") or DEFAULT_LOCALE


def is_supported(code: str | None) -> bool:
    return bool(code) and code in supported_locales()


def text_direction(locale: str) -> str:
    return "rtl" if locale in current_app.config.get("RTL_LANGUAGES", {"ar"}) else "ltr"


def path_locale(path: str) -> str | None:
    """Return the first path segment when it is a supported locale."""
    first = path.lstrip("/").split("/", 1)[0]
    return first if is_supported(first) else None


def resolve_locale(path: str) -> str:
    return path_locale(path) or default_locale()


def negotiate_locale() -> str:
    """Locale for a request that carries none in its path."""
    remembered = session.get("lang")
    if is_supported(remembered):
        return remembered
    return request.accept_languages.best_match(supported_locales()) or default_locale()


def current_locale() -> str:
    return getattr(g, "locale", None) or default_locale()


# -----------------
# Bundles
# -----------------

@lru_cache(maxsize=None)
def load_bundle(locale: str) -> dict:
    path = TRANSLATIONS_DIR / f"{locale}.json"
    if not path.exists():
        log.warning("No translation bundle for %s", locale)
        return {}
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


def _lookup(bundle: dict, key: str):
    node = bundle
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translate(key: str, locale: str | None = None, **params) -> str:
    locale = locale or current_locale()
    value = _lookup(load_bundle(locale), key)
    if not value and locale != DEFAULT_LOCALE:
        value = _lookup(load_bundle(DEFAULT_LOCALE), key)
    if not value:
        return key
    if params:
        try:
            value = value.format(**params)
        except (KeyError, IndexError, ValueError):
            log.warning("Bad placeholders for %s (%s)", key, locale)
    return value


# -----------------
# Localized DB fields
# -----------------

def normalize_localized(value, locales=None) -> dict:
    """Coerce a string or locale map into ``{code: text}`` that always has "en"."""
    locales = locales or supported_locales()
    if value is None:
        value = {}
    if isinstance(value, str):
        value = {DEFAULT_LOCALE: value}
    if not isinstance(value, dict):
        raise ValueError("Localized text must be a string or a locale map")

    out = {}
    for code in locales:
        text = value.get(code)
        if text is None:
            continue
        out[code] = str(text).strip()

    if not out.get(DEFAULT_LOCALE):
        out[DEFAULT_LOCALE] = next((v for v in out.values() if v), "")
    return out


def localized(value, locale: str | None = None) -> str:
    if not value:
        return ""
    if isinstance(value, str):
        return value
    locale = locale or current_locale()
    return value.get(locale) or value.get(DEFAULT_LOCALE) or ""


# -----------------
# URL prefix wiring
# -----------------

def register_locale_prefix(bp):
    """Blueprints mounted at ``/<locale>`` get the locale popped into ``g``."""

    @bp.url_defaults
    def _add_locale(endpoint, values):
        values.setdefault("locale", current_locale())

    @bp.url_value_preprocessor
    def _pull_locale(endpoint, values):
        code = (values or {}).pop("locale", None)
        if not is_supported(code):
            abort(404)
        g.locale = code


def switch_locale_url(code: str) -> str:
    """Current path with its locale segment swapped for ``code``."""
    parts = request.path.lstrip("/").split("/", 1)
    rest = parts[1] if len(parts) > 1 and is_supported(parts[0]) else ""
    url = f"/{code}/{rest}"
    if request.query_string:
        url += "?" + request.query_string.decode("utf-8", "replace")
    return url
