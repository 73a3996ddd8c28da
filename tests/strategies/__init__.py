"""Hypothesis strategies for msgbundle property-based testing.

Usage:
    from tests.strategies import locale_codes, message_keys, source_stacks
"""

from .bundles import (
    locale_codes,
    message_keys,
    plain_templates,
    source_mappings,
    source_stacks,
)

__all__ = [
    "locale_codes",
    "message_keys",
    "plain_templates",
    "source_mappings",
    "source_stacks",
]
