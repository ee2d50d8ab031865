"""
Serialization of selections into navigational path query text.

``QuerySerializer`` lives in ``npqgen.serialize.serializer``; it is not
re-exported here because walk paths render through this package.
"""

from npqgen.serialize.encoding import to_alphabetic
from npqgen.serialize.path_renderer import render_path

__all__ = [
    "to_alphabetic",
    "render_path",
]
