"""PropertiesBundle - ResourceBundle-like bundles over UTF-8 property files.

Given a base name, a locale is served from the sibling file carrying the
locale as a suffix before the extension:

    messages.properties          root locale
    messages_fr.properties       fr
    messages_fr_CA.properties    fr_CA

By default the loader walks the locale's fallback chain (fr_CA, fr, root)
and materializes the first file that exists, so "fr_CA" is answered from
messages_fr.properties when there is no Canadian file. With
fallback=False only the exact file is tried.

The result is an ordinary MessageBundle with one loading provider: thaw()
it to stack other sources before or after the files.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from msgbundle import _internal
from msgbundle.bundle.builder import MessageBundleBuilder
from msgbundle.constants import LOCALE_SEPARATOR, PROPERTIES_SUFFIX
from msgbundle.locale_utils import is_root_locale, locale_fallback_chain
from msgbundle.provider.loading import LoadingMessageSourceProvider
from msgbundle.source.properties import PropertiesMessageSource

if TYPE_CHECKING:
    from msgbundle.bundle.bundle import MessageBundle
    from msgbundle.types import LocaleCode

__all__ = [
    "PropertiesBundle",
    "PropertiesSourceLoader",
    "resource_name",
]

logger = logging.getLogger(__name__)


def resource_name(base: str, locale: LocaleCode) -> str:
    """Return the property file name holding base for locale.

    Example:
        >>> resource_name("messages", "fr_FR")
        'messages_fr_FR.properties'
        >>> resource_name("messages", "")
        'messages.properties'
    """
    if is_root_locale(locale):
        return f"{base}{PROPERTIES_SUFFIX}"
    return f"{base}{LOCALE_SEPARATOR}{locale}{PROPERTIES_SUFFIX}"


def _strip_suffix(base: str) -> str:
    return base.removesuffix(PROPERTIES_SUFFIX)


@dataclass(frozen=True, slots=True)
class PropertiesSourceLoader:
    """Loader reading base_<locale>.properties from disk or a package.

    Implements the MessageSourceLoader protocol.

    Attributes:
        base: Base name without extension, a filesystem path when package
            is None, otherwise a path relative to the package
        package: Dotted package name for package resources, or None
        fallback: Walk the locale fallback chain instead of trying only
            the exact locale
    """

    base: str
    package: str | None = None
    fallback: bool = True

    def candidates(self, locale: LocaleCode) -> tuple[str, ...]:
        """Return the file names tried for locale, in order."""
        locales = locale_fallback_chain(locale) if self.fallback else (locale,)
        return tuple(resource_name(self.base, candidate) for candidate in locales)

    def _read(self, name: str) -> PropertiesMessageSource:
        if self.package is None:
            return PropertiesMessageSource.from_path(Path(name))
        return PropertiesMessageSource.from_resource(self.package, name)

    def __call__(self, locale: LocaleCode) -> PropertiesMessageSource:
        """Load the first existing candidate file for locale.

        Raises:
            FileNotFoundError: If no candidate exists
            OSError: If a file exists but cannot be read
            UnicodeDecodeError: If a file is not valid UTF-8
        """
        names = self.candidates(locale)
        for name in names:
            try:
                source = self._read(name)
            except FileNotFoundError:
                continue
            logger.debug("Locale '%s' served from %s", locale, name)
            return source
        msg = f"No property file for locale '{locale}' (tried: {', '.join(names)})"
        raise FileNotFoundError(msg)


class PropertiesBundle:
    """Factory for MessageBundle objects backed by property files.

    Example:
        >>> bundle = PropertiesBundle.for_path("locales/messages")
        >>> bundle.get_message("greet", locale="fr_FR")
        >>> bundle = PropertiesBundle.for_resource("myapp.i18n", "messages")
    """

    __slots__ = ()

    @staticmethod
    def _freeze(loader: PropertiesSourceLoader) -> MessageBundle:
        provider = LoadingMessageSourceProvider(loader)
        return MessageBundleBuilder().append_provider(provider).freeze()

    @staticmethod
    def for_path(base_path: str | Path, *, fallback: bool = True) -> MessageBundle:
        """Create a bundle reading property files from the filesystem.

        Args:
            base_path: Base path, with or without the ".properties"
                extension (e.g., "locales/messages")
            fallback: Walk the locale fallback chain (default: True)

        Returns:
            A frozen MessageBundle with one loading provider

        Raises:
            NullReferenceError: If base_path is None
        """
        _internal.not_null(base_path, "cfg.nullPath")
        return PropertiesBundle._freeze(
            PropertiesSourceLoader(_strip_suffix(str(base_path)), fallback=fallback)
        )

    @staticmethod
    def for_resource(package: str, base: str, *, fallback: bool = True) -> MessageBundle:
        """Create a bundle reading property files shipped inside a package.

        Args:
            package: Dotted package name (e.g., "myapp.i18n")
            base: Base name relative to the package, with or without the
                ".properties" extension (e.g., "messages")
            fallback: Walk the locale fallback chain (default: True)

        Returns:
            A frozen MessageBundle with one loading provider

        Raises:
            NullReferenceError: If package or base is None
        """
        _internal.not_null(package, "cfg.nullPackage")
        _internal.not_null(base, "cfg.nullPath")
        return PropertiesBundle._freeze(
            PropertiesSourceLoader(
                _strip_suffix(base.lstrip("/")), package=package, fallback=fallback
            )
        )
