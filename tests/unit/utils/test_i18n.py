from __future__ import annotations

"""
Unit tests for Internationalization (i18n) consistency.

Ensures that all locale files (en.json, es.json) share the exact
same key structure and dot-notation resolution works as expected.
"""

import json
import os
from typing import Any, Dict, Set

from packager.utils.i18n import I18n

LOCALES_DIR = os.path.abspath(os.path.join(
    os.path.dirname(os.path.abspath(__file__)),
    "..", "..", "..", "src", "packager", "interface", "locales",
))


def _get_flat_keys(d: Dict[str, Any], prefix: str = "") -> Set[str]:
    """Helper to flatten nested dictionary keys into dot-notation sets."""
    keys = set()
    for k, v in d.items():
        new_key = f"{prefix}.{k}" if prefix else k
        if isinstance(v, dict):
            keys.update(_get_flat_keys(v, new_key))
        else:
            keys.add(new_key)
    return keys


def _load(locale: str) -> Dict[str, Any]:
    with open(os.path.join(LOCALES_DIR, f"{locale}.json"), "r", encoding="utf-8") as f:
        return json.load(f)


def test_locales_key_parity() -> None:
    """TC-01: Verify that EN and ES locales have identical keys."""
    en_keys = _get_flat_keys(_load("en"))
    es_keys = _get_flat_keys(_load("es"))

    assert not en_keys - es_keys, f"Keys present in EN but missing in ES: {en_keys - es_keys}"
    assert not es_keys - en_keys, f"Keys present in ES but missing in EN: {es_keys - en_keys}"


def test_translation_resolution_and_formatting() -> None:
    """TC-02: Dot-notation lookup with keyword interpolation."""
    tr = I18n("en")

    assert tr.is_loaded is True
    assert tr.locale == "en"
    assert tr.t("cli.status.generated", path="packages/acme/blog") == (
        "Package created: packages/acme/blog"
    )


def test_missing_key_fallbacks() -> None:
    """TC-03: Unknown keys return the default, else the key itself."""
    tr = I18n("en")

    assert tr.t("cli.status.nope") == "cli.status.nope"
    assert tr.t("cli.status.nope", default="fallback") == "fallback"
    # A non-leaf path is not a message
    assert tr.t("cli.status") == "cli.status"


def test_missing_placeholder_keeps_template() -> None:
    tr = I18n("en")
    assert tr.t("cli.status.generated", other="x") == "Package created: {path}"


def test_spanish_locale() -> None:
    tr = I18n("es")
    assert tr.t("cli.status.removed", path="p") == "Paquete eliminado: p"


def test_unknown_locale_is_not_loaded() -> None:
    tr = I18n("xx")
    assert tr.is_loaded is False
    assert tr.t("app.description") == "app.description"
