"""MessageBundle - immutable, ordered stack of message source providers.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from msgbundle import _internal
from msgbundle.constants import FALLBACK_MISSING_KEY
from msgbundle.errors import IllegalArgumentError, NullReferenceError
from msgbundle.formatting import format_braces, interpolate
from msgbundle.locale_utils import ROOT_LOCALE, canonicalize_locale
from msgbundle.types import LocaleCode, MessageKey, MessageTemplate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from msgbundle.bundle.builder import MessageBundleBuilder
    from msgbundle.provider.base import MessageSourceProvider

__all__ = ["MessageBundle"]

logger = logging.getLogger(__name__)

type _Formatter = Callable[..., str]


class MessageBundle:
    """Resolve message keys against an ordered stack of providers.

    A bundle is a pure function of its providers: for a key and a locale it
    asks each provider, in order, for the source of that locale, and returns
    the first template any source defines. A later provider never overrides
    an earlier one. The bundle itself does not retry with a coarser locale;
    locale fallback is each provider's policy.

    When no provider knows the key, get_message() returns the sentinel
    "!key!" instead of raising, so a missing translation is visible but not
    fatal. printf() and format() return the same sentinel without
    interpolating it.

    Bundles are immutable. To derive a new bundle, thaw() one into a
    builder, modify the builder, and freeze() it again; the original is
    never affected.

    Thread Safety:
        All methods are safe for concurrent use. The provider tuple is fixed
        at construction; providers are immutable or internally synchronized.

    Example:
        >>> bundle = (
        ...     MessageBundle.builder()
        ...     .append_source(MapMessageSource({"greet": "Hello, %s!"}))
        ...     .freeze()
        ... )
        >>> bundle.printf("greet", "World")
        'Hello, World!'
        >>> bundle.get_message("nope")
        '!nope!'
        >>> french = MapMessageSource({"greet": "Bonjour, %s !"})
        >>> localized = bundle.thaw().prepend_provider(
        ...     StaticMessageSourceProvider.with_single_source(french, "fr")
        ... ).freeze()
        >>> localized.printf("greet", "Marie", locale="fr")
        'Bonjour, Marie !'
    """

    __slots__ = ("_providers",)

    def __init__(self, providers: Iterable[MessageSourceProvider] = ()) -> None:
        """Initialize from providers, highest precedence first.

        Most code should use MessageBundleBuilder.freeze() instead.

        Args:
            providers: Providers in precedence order (copied)

        Raises:
            NullReferenceError: If any provider is None
        """
        self._providers: tuple[MessageSourceProvider, ...] = tuple(
            _internal.not_null(provider, "cfg.nullProvider") for provider in providers
        )

    @staticmethod
    def builder() -> MessageBundleBuilder:
        """Create a new, empty builder."""
        # Lazy import: builder.py imports this module
        from msgbundle.bundle.builder import MessageBundleBuilder  # noqa: PLC0415

        return MessageBundleBuilder()

    @property
    def providers(self) -> tuple[MessageSourceProvider, ...]:
        """Providers in precedence order (read-only)."""
        return self._providers

    def thaw(self) -> MessageBundleBuilder:
        """Return a new builder seeded with a copy of this bundle's providers.

        The builder shares no storage with this bundle: appending to it and
        freezing yields a new bundle and leaves this one unchanged.
        """
        from msgbundle.bundle.builder import MessageBundleBuilder  # noqa: PLC0415

        return MessageBundleBuilder(self._providers)

    def find_template(
        self,
        key: MessageKey,
        *,
        locale: LocaleCode = ROOT_LOCALE,
    ) -> MessageTemplate | None:
        """Return the raw template for key, or None if no provider has it.

        Args:
            key: Message key
            locale: Requested locale (defaults to the root locale)

        Returns:
            The first template found walking providers in order, or None

        Raises:
            NullReferenceError: If key or locale is None
            IllegalArgumentError: If locale is malformed
        """
        return self._find(key, self._canonical_query(key, locale))

    @staticmethod
    def _canonical_query(key: MessageKey, locale: LocaleCode) -> LocaleCode:
        _internal.not_null(key, "query.nullKey")
        _internal.not_null(locale, "query.nullLocale")
        return canonicalize_locale(locale)

    def _find(self, key: MessageKey, canonical: LocaleCode) -> MessageTemplate | None:
        for provider in self._providers:
            source = provider.get_source(canonical)
            if source is None:
                continue
            template = source.get_key(key)
            if template is not None:
                return template
        return None

    def _resolve(
        self,
        key: MessageKey,
        args: Sequence[object],
        locale: LocaleCode,
        formatter: _Formatter | None,
    ) -> str:
        canonical = self._canonical_query(key, locale)
        template = self._find(key, canonical)
        if template is None:
            logger.warning("Message key '%s' not found for locale '%s'", key, canonical)
            return FALLBACK_MISSING_KEY.format(key=key)
        if formatter is None:
            return template
        return formatter(template, args, key=key)

    def get_message(self, key: MessageKey, *, locale: LocaleCode = ROOT_LOCALE) -> str:
        """Return the raw message for key, or "!key!" if no provider has it.

        Args:
            key: Message key
            locale: Requested locale (defaults to the root locale)

        Returns:
            The template, unformatted, or the missing-key sentinel

        Raises:
            NullReferenceError: If key or locale is None
            IllegalArgumentError: If locale is malformed
        """
        return self._resolve(key, (), locale, None)

    def printf(self, key: MessageKey, *args: object, locale: LocaleCode = ROOT_LOCALE) -> str:
        """Return the message for key with printf-style arguments substituted.

        Args:
            key: Message key
            *args: Positional arguments for the template's specifiers
            locale: Requested locale (defaults to the root locale)

        Returns:
            The formatted message, or the missing-key sentinel (never
            interpolated)

        Raises:
            NullReferenceError: If key or locale is None
            IllegalArgumentError: If locale is malformed
            MessageFormatError: If the template and arguments do not match
        """
        return self._resolve(key, args, locale, interpolate)

    def format(self, key: MessageKey, *args: object, locale: LocaleCode = ROOT_LOCALE) -> str:
        """Return the message for key with "{0}"-style fields substituted.

        Same resolution as printf(); uses str.format() positional fields.

        Raises:
            NullReferenceError: If key or locale is None
            IllegalArgumentError: If locale is malformed
            MessageFormatError: If a field has no matching argument
        """
        return self._resolve(key, args, locale, format_braces)

    def _precondition_message(
        self, key: MessageKey, args: Sequence[object], locale: LocaleCode
    ) -> str:
        if args:
            return self.printf(key, *args, locale=locale)
        return self.get_message(key, locale=locale)

    def check_not_null[T](
        self,
        reference: T | None,
        key: MessageKey,
        *args: object,
        locale: LocaleCode = ROOT_LOCALE,
    ) -> T:
        """Return reference, or raise NullReferenceError if it is None.

        The error message is the message for key, resolved exactly like
        printf() when args are given and get_message() otherwise. A missing
        key still raises, with "!key!" as the message.

        Args:
            reference: Value to check
            key: Message key for the error message
            *args: printf arguments for the error message
            locale: Locale of the error message

        Returns:
            reference, unchanged

        Raises:
            NullReferenceError: If reference is None

        Example:
            >>> self.name = bundle.check_not_null(name, "user.nullName")
        """
        if reference is None:
            raise NullReferenceError(self._precondition_message(key, args, locale))
        return reference

    def check_argument(
        self,
        condition: object,
        key: MessageKey,
        *args: object,
        locale: LocaleCode = ROOT_LOCALE,
    ) -> None:
        """Raise IllegalArgumentError if condition is falsy.

        The error message is resolved like check_not_null()'s.

        Args:
            condition: Condition that must hold
            key: Message key for the error message
            *args: printf arguments for the error message
            locale: Locale of the error message

        Raises:
            IllegalArgumentError: If condition is falsy

        Example:
            >>> bundle.check_argument(age >= 0, "user.negativeAge", age)
        """
        if not condition:
            raise IllegalArgumentError(self._precondition_message(key, args, locale))

    def __repr__(self) -> str:
        return f"MessageBundle(providers={len(self._providers)})"
