"""Locale Fallback Example - Property Files and Layered Bundles.

Demonstrates real-world usage of msgbundle for handling incomplete
translations.

Scenarios covered:
1. Property files with fallback along the locale chain (lv_LV -> lv -> root)
2. Exact-match property files (fallback=False)
3. Application overrides stacked on library defaults
4. Custom loaders (in-memory, e.g. a database)

Note on Missing Keys:
    A key no tier defines resolves to "!key!". The msgbundle logger emits a
    warning for each miss; route it to your log aggregation in production.

Python 3.13+.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from msgbundle import (
    LoadingMessageSourceProvider,
    MapMessageSource,
    MessageBundle,
    PropertiesBundle,
    PropertiesMessageSource,
)
from msgbundle.locale_utils import locale_fallback_chain
from msgbundle.source import MessageSource


def _write_locales(root: Path) -> Path:
    base = root / "shop"
    files = {
        "shop.properties": (
            "welcome = Hello, %s!\n"
            "cart = Cart\n"
            "checkout = Checkout\n"
            "payment.error = Payment failed: %s\n"
        ),
        "shop_lv.properties": "welcome = Sveiki, %s!\ncart = Grozs\ncheckout = Kase\n",
        "shop_lv_LV.properties": "welcome = Sveiki, %s! (Latvija)\n",
    }
    for name, text in files.items():
        (root / name).write_text(text, encoding="utf-8")
    return base


def example_1_chain_fallback(base: Path) -> None:
    """Example 1: A locale is served by its most specific existing file."""
    print("=" * 60)
    print("Example 1: Fallback Along the Locale Chain")
    print("=" * 60)

    bundle = PropertiesBundle.for_path(base)

    for locale in ("lv_LV", "lv", "lv_Latn_LV", "en_US"):
        chain = " -> ".join(code or "root" for code in locale_fallback_chain(locale))
        print(f"\n{locale} ({chain}):")
        print(f"  welcome: {bundle.printf('welcome', 'Anna', locale=locale)}")
        print(f"  cart: {bundle.get_message('cart', locale=locale)}")

    # Only the first existing file is used: lv_LV has no "cart"
    print("\nNote: files do not merge; lv_LV lacks 'cart', so it is a miss:")
    print(f"  cart: {bundle.get_message('cart', locale='lv_LV')}")


def example_2_exact_files(base: Path) -> None:
    """Example 2: fallback=False only reads the exact locale's file."""
    print("\n" + "=" * 60)
    print("Example 2: Exact Files Layered Over a Root File")
    print("=" * 60)

    # Stack: exact-locale files first, then the root file for every locale
    exact = PropertiesBundle.for_path(base, fallback=False)
    root = PropertiesMessageSource.from_path(base.with_suffix(".properties"))
    bundle = exact.thaw().append_source(root).freeze()

    for key in ("welcome", "cart", "checkout", "payment.error"):
        print(f"  lv_LV {key}: {bundle.get_message(key, locale='lv_LV')}")


def example_3_overrides(base: Path) -> None:
    """Example 3: Application overrides take precedence over shipped files."""
    print("\n" + "=" * 60)
    print("Example 3: Overrides")
    print("=" * 60)

    shipped = PropertiesBundle.for_path(base)
    branded = shipped.thaw().prepend_source(MapMessageSource({"cart": "Basket"})).freeze()

    print(f"  shipped cart: {shipped.get_message('cart')}")
    print(f"  branded cart: {branded.get_message('cart')}")
    print(f"  branded checkout: {branded.get_message('checkout')}")


def example_4_custom_loader() -> None:
    """Example 4: Custom loader (in-memory)."""
    print("\n" + "=" * 60)
    print("Example 4: Custom In-Memory Loader")
    print("=" * 60)

    store = {
        "en": {"home": "Home", "about": "About Us"},
        "lt": {"home": "Namai"},
    }

    def load(locale: str) -> MessageSource | None:
        print(f"  [loader] materializing {locale or 'root'}")
        messages = store.get(locale)
        return MapMessageSource(messages) if messages is not None else None

    provider = LoadingMessageSourceProvider(load, default_source=MapMessageSource(store["en"]))
    bundle = MessageBundle.builder().append_provider(provider).freeze()

    for locale in ("lt", "lt", "de"):
        print(f"  {locale} home: {bundle.get_message('home', locale=locale)}")
    print(f"  lt about: {bundle.get_message('about', locale='lt')}")
    print(f"  {provider.get_load_summary()!r}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.ERROR)
    with tempfile.TemporaryDirectory() as tmp:
        shop = _write_locales(Path(tmp))
        example_1_chain_fallback(shop)
        example_2_exact_files(shop)
        example_3_overrides(shop)
    example_4_custom_loader()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples completed successfully!")
    print("=" * 60)
