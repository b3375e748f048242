"""
Error message lookup for semantic-attributes.

Symbolic error messages (`MessageKey`) are resolved here by default. Messages
live in JSON files, one per locale, addressed with dot notation:

    {"semantic-attributes": {"errors": {"messages": {"invalid": "is invalid"}}}}

The package bundles its own `lang/<locale>.json`; an application `lang/`
directory (`LOCALE_PATH`) overrides the bundled entries key by key.

Usage:
    from semantic_attributes.core.localization import __, set_locale

    __('semantic-attributes.errors.messages.invalid')         # Basic lookup
    __('greeting', {'name': 'John'})                           # With parameters
    __('missing.key', default='Fallback')                      # With default
    set_locale('es')                                           # Change locale
"""

import json
import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Dict, Any, Optional

from semantic_attributes import config

_translations: Dict[str, Dict[str, Any]] = {}
_locale_path: str = config.LOCALE_PATH
_current_locale: ContextVar[str] = ContextVar('locale', default=config.LOCALE_DEFAULT)


def _get_nested(data: Dict[str, Any], key: str) -> Optional[str]:
    """Navigate nested dict with dot notation."""
    current = data
    for part in key.split('.'):
        if isinstance(current, dict) and part in current:
            current = current[part]
        else:
            return None
    return current


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_locale_file(locale_file: Path) -> Dict[str, Any]:
    if not locale_file.exists():
        return {}
    try:
        with locale_file.open(encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logging.warning(f"[LOCALIZATION] Ignoring unreadable locale file {locale_file}: {e}")
        return {}
    if not isinstance(data, dict):
        logging.warning(f"[LOCALIZATION] Ignoring locale file {locale_file}: top level is not an object")
        return {}
    return data


def _load_locale(locale: str) -> Dict[str, Any]:
    """Load and cache the bundled and application messages for a locale."""
    if locale in _translations:
        return _translations[locale]

    bundled = _read_locale_file(Path(config.BUNDLED_LOCALE_PATH) / f"{locale}.json")
    application = _read_locale_file(Path(_locale_path) / f"{locale}.json")

    translations = _deep_merge(bundled, application)
    _translations[locale] = translations
    return translations


def __(key: str, parameters: Optional[Dict[str, Any]] = None,
      default: Optional[str] = None, locale: Optional[str] = None) -> str:
    """
    Look up a message by dotted key.

    Tries the current locale, then the fallback locale, then `default`, then
    the key itself. Parameters are applied with `str.format`; a message that
    references a missing parameter is returned unformatted.

    Examples:
        __('semantic-attributes.errors.messages.invalid')
        __('greet', {'name': 'John'})
        __('missing', default='Not found')
        __('title', locale='es')
    """
    current_locale = locale or _current_locale.get()

    translation = _get_nested(_load_locale(current_locale), key)

    if translation is None and current_locale != config.LOCALE_FALLBACK:
        translation = _get_nested(_load_locale(config.LOCALE_FALLBACK), key)

    if translation is None:
        translation = default or key

    if parameters and isinstance(translation, str):
        try:
            translation = translation.format(**parameters)
        except (KeyError, IndexError, ValueError) as e:
            logging.debug(f"[LOCALIZATION] Could not interpolate `{key}`: {e}")

    return str(translation)


def translate_error(key: str, scope: str, parameters: Optional[Dict[str, Any]] = None) -> str:
    """Default translator for symbolic predicate error messages."""
    return __(f"{scope}.{key}", parameters)


def set_locale(locale: str) -> None:
    """Set the current locale."""
    _current_locale.set(locale)


def get_locale() -> str:
    """Get the current locale."""
    return _current_locale.get()


def clear_cache() -> None:
    """Clear the message cache so locale files are read again."""
    _translations.clear()


def set_locale_path(path: str) -> None:
    """Point the lookup at another application `lang/` directory."""
    global _locale_path
    _locale_path = path
    clear_cache()


def get_locale_path() -> str:
    return _locale_path


trans = __

__all__ = [
    "__",
    "trans",
    "translate_error",
    "set_locale",
    "get_locale",
    "clear_cache",
    "set_locale_path",
    "get_locale_path",
]
