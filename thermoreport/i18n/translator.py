"""
thermoreport/i18n/translator.py
───────────────────────────────
Translation lookup over JSON locale files.

Usage:
    from thermoreport.i18n.translator import t, lookup

    t("state.loading")                      # → "Carregando relatório..."
    t("dates.months.3", "es")               # → "marzo"
    lookup("dates.connectors", "pt-BR")     # → ["de"]

Locales are addressed by tag ("pt-BR", "es", "en"). "pt_BR" is accepted,
and a regional tag with no file of its own ("es-CL") uses its base
language. Unknown locales fall back to pt-BR.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

_LOCALES_DIR = Path(__file__).parent / "locales"
FALLBACK_LOCALE = "pt-BR"


def available_locales() -> list[str]:
    return sorted(p.stem for p in _LOCALES_DIR.glob("*.json"))


def resolve_locale(lang: str | None) -> str:
    if not lang:
        return FALLBACK_LOCALE
    tag = lang.replace("_", "-")
    known = {loc.lower(): loc for loc in available_locales()}
    if tag.lower() in known:
        return known[tag.lower()]
    base = tag.split("-")[0].lower()
    return known.get(base, FALLBACK_LOCALE)


@lru_cache(maxsize=8)
def _load_locale(lang: str) -> dict:
    path = _LOCALES_DIR / f"{lang}.json"
    if not path.exists():
        path = _LOCALES_DIR / f"{FALLBACK_LOCALE}.json"
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def lookup(key: str, lang: str | None = None, default=None):
    """Return the raw node (str, list, or dict) at a dot-separated key."""
    node = _load_locale(resolve_locale(lang))
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node


def t(key: str, lang: str | None = None) -> str:
    """
    Translate a dot-separated key.

    Returns the key itself when it is not found.
    """
    value = lookup(key, lang, default=key)
    return value if isinstance(value, str) else key
