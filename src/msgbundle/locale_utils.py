"""Locale utilities: canonical locale codes and fallback chains.

Locales are plain strings in POSIX form ("en", "fr_FR", "zh_Hans_CN",
"en_US_POSIX"). The root locale, meaning "no locale", is the empty string.
Every public entry point canonicalizes at the boundary with
canonicalize_locale(), so providers and caches only ever see one spelling
of a given locale.

Python 3.13+. External dependency: Babel (locale identifier parsing).
"""

from __future__ import annotations

import functools
import os

from babel.core import parse_locale

from msgbundle import _internal
from msgbundle.errors import IllegalArgumentError
from msgbundle.types import LocaleCode

__all__ = [
    "ROOT_LOCALE",
    "canonicalize_locale",
    "get_system_locale",
    "is_root_locale",
    "locale_fallback_chain",
    "normalize_locale",
]

ROOT_LOCALE: LocaleCode = ""
"""The root locale: no language, no region, no variant."""

# Spellings accepted for the root locale. "root" is CLDR's name for it.
_ROOT_ALIASES: frozenset[str] = frozenset(("", "root"))


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 separators to POSIX separators.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Case is left untouched; canonicalize_locale() fixes it.

    Args:
        locale_code: Locale code (e.g., "en-US", "pt_BR")

    Returns:
        Locale code with underscores (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=256)
def _canonicalize(locale_code: str) -> LocaleCode:
    stripped = locale_code.strip()
    if stripped.lower() in _ROOT_ALIASES:
        return ROOT_LOCALE
    try:
        parts = parse_locale(normalize_locale(stripped))
    except ValueError as e:
        msg = _internal.messages().printf("locale.invalid", locale_code)
        raise IllegalArgumentError(msg) from e
    # parse_locale returns (language, territory, script, variant[, modifier])
    language, territory, script, variant = parts[:4]
    return "_".join(part for part in (language, script, territory, variant) if part)


def canonicalize_locale(locale_code: str | None) -> LocaleCode:
    """Return the canonical POSIX spelling of a locale code.

    Accepts POSIX or BCP-47 separators in any case. The language is
    lowercased, the script titlecased, the territory and variant uppercased.
    Encoding suffixes (".UTF-8") are dropped. "" and "root" denote the root
    locale.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code to canonicalize

    Returns:
        Canonical locale code

    Raises:
        NullReferenceError: If locale_code is None
        IllegalArgumentError: If locale_code is not a valid identifier

    Example:
        >>> canonicalize_locale("en-us")
        'en_US'
        >>> canonicalize_locale("zh-hans-cn")
        'zh_Hans_CN'
        >>> canonicalize_locale("root")
        ''
    """
    return _canonicalize(_internal.not_null(locale_code, "query.nullLocale"))


def is_root_locale(locale_code: LocaleCode) -> bool:
    """Check whether a canonical locale code is the root locale."""
    return locale_code == ROOT_LOCALE


def locale_fallback_chain(locale_code: str | None) -> tuple[LocaleCode, ...]:
    """Return the fallback chain of a locale, most specific first.

    Subtags are removed from the right until only the root locale remains.

    Args:
        locale_code: Locale code (canonicalized first)

    Returns:
        Tuple of canonical locale codes ending with ROOT_LOCALE

    Raises:
        NullReferenceError: If locale_code is None
        IllegalArgumentError: If locale_code is not a valid identifier

    Example:
        >>> locale_fallback_chain("en_US_POSIX")
        ('en_US_POSIX', 'en_US', 'en', '')
        >>> locale_fallback_chain("")
        ('',)
    """
    canonical = canonicalize_locale(locale_code)
    if is_root_locale(canonical):
        return (ROOT_LOCALE,)
    parts = canonical.split("_")
    chain = ["_".join(parts[:end]) for end in range(len(parts), 0, -1)]
    chain.append(ROOT_LOCALE)
    return tuple(chain)


def get_system_locale(*, raise_on_failure: bool = False) -> LocaleCode:
    """Detect the user's locale from environment variables.

    Detection order: LC_ALL, LC_MESSAGES, LANG. The "C" and "POSIX"
    pseudo-locales are ignored. Encoding suffixes are stripped and the
    result is canonicalized.

    Args:
        raise_on_failure: If True, raise RuntimeError when no locale can be
            determined. If False (default), return the root locale.

    Returns:
        Detected canonical locale code, or ROOT_LOCALE

    Raises:
        RuntimeError: If raise_on_failure is True and no locale is set.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de_DE'
    """
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if not value:
            continue
        # Strip encoding suffix (e.g., ".UTF-8") before the pseudo-locale check
        locale_code = value.split(".")[0]
        if locale_code not in ("C", "POSIX", ""):
            try:
                return canonicalize_locale(locale_code)
            except IllegalArgumentError:
                continue

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return ROOT_LOCALE
