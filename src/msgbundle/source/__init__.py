"""Message sources: key to raw template lookup tables for one locale slice.

Submodules:
    base       - MessageSource protocol
    mapping    - MapMessageSource (in-memory)
    properties - PropertiesMessageSource and the UTF-8 property-file parser

Python 3.13+.
"""

from msgbundle.source.base import MessageSource
from msgbundle.source.mapping import MapMessageSource
from msgbundle.source.properties import PropertiesMessageSource, parse_properties

__all__ = [
    "MapMessageSource",
    "MessageSource",
    "PropertiesMessageSource",
    "parse_properties",
]
