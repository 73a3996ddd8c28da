"""Quickstart example for msgbundle.

This example demonstrates basic usage of msgbundle: stacking message
sources into a bundle, formatting messages, and deriving new bundles.

Note: A missing key never raises; it resolves to the visible "!key!"
sentinel. Watch the msgbundle logger for "not found" warnings in production.
"""

import tempfile
from pathlib import Path

from msgbundle import (
    IllegalArgumentError,
    MapMessageSource,
    MessageBundle,
    MessageFormatError,
    PropertiesBundle,
    StaticMessageSourceProvider,
)

# Example 1: Simple message
print("=" * 50)
print("Example 1: Simple Message")
print("=" * 50)

bundle = (
    MessageBundle.builder()
    .append_source(MapMessageSource({
        "hello": "Hello, World!",
        "welcome": "Welcome to msgbundle!",
    }))
    .freeze()
)

print(bundle.get_message("hello"))
# Output: Hello, World!

print(bundle.get_message("welcome"))
# Output: Welcome to msgbundle!

# Example 2: Arguments
print("\n" + "=" * 50)
print("Example 2: printf-style Arguments")
print("=" * 50)

bundle = (
    MessageBundle.builder()
    .append_source(MapMessageSource({
        "greeting": "Hello, %s!",
        "user-info": "%s %s (Age: %d)",
        "reordered": "%2$s, %1$s",
        "discount": "%.1f%% off",
    }))
    .freeze()
)

print(bundle.printf("greeting", "Alice"))
# Output: Hello, Alice!

print(bundle.printf("user-info", "Bob", "Smith", 30))
# Output: Bob Smith (Age: 30)

print(bundle.printf("reordered", "World", "Hello"))
# Output: Hello, World

print(bundle.printf("discount", 12.5))
# Output: 12.5% off

# Example 3: Overrides
print("\n" + "=" * 50)
print("Example 3: Overrides with thaw()")
print("=" * 50)

overrides = MapMessageSource({"greeting": "Howdy, %s!"})
custom = bundle.thaw().prepend_source(overrides).freeze()

print(custom.printf("greeting", "Carol"))
# Output: Howdy, Carol!

print(bundle.printf("greeting", "Carol"))
# Output: Hello, Carol!  (the original bundle is unchanged)

# Example 4: Locales
print("\n" + "=" * 50)
print("Example 4: Per-Locale Sources")
print("=" * 50)

french = StaticMessageSourceProvider.with_single_source(
    MapMessageSource({"greeting": "Bonjour, %s !"}), "fr"
)
localized = bundle.thaw().prepend_provider(french).freeze()

print(localized.printf("greeting", "Marie", locale="fr"))
# Output: Bonjour, Marie !

print(localized.printf("greeting", "Marie", locale="de"))
# Output: Hello, Marie!

# Example 5: Missing keys and errors
print("\n" + "=" * 50)
print("Example 5: Missing Keys and Format Errors")
print("=" * 50)

print(bundle.get_message("no-such-key"))
# Output: !no-such-key!

try:
    bundle.printf("user-info", "Bob", "Smith", "thirty")
except MessageFormatError as e:
    print(f"Format error: {e}")

# Example 6: Preconditions
print("\n" + "=" * 50)
print("Example 6: Localized Preconditions")
print("=" * 50)

checks = (
    MessageBundle.builder()
    .append_source(MapMessageSource({"age.negative": "age must be >= 0, got %d"}))
    .freeze()
)

try:
    checks.check_argument(-1 >= 0, "age.negative", -1)
except IllegalArgumentError as e:
    print(f"Rejected: {e}")
# Output: Rejected: age must be >= 0, got -1

# Example 7: Property files
print("\n" + "=" * 50)
print("Example 7: Property Files")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmp:
    base = Path(tmp) / "messages"
    Path(f"{base}.properties").write_text("greet = Hello, %s!\n", encoding="utf-8")
    Path(f"{base}_lv.properties").write_text("greet = Sveiki, %s!\n", encoding="utf-8")

    files = PropertiesBundle.for_path(base)
    print(files.printf("greet", "Jānis", locale="lv_LV"))
    # Output: Sveiki, Jānis!  (lv_LV falls back to messages_lv.properties)
    print(files.printf("greet", "John", locale="en"))
    # Output: Hello, John!

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
