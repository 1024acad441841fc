"""
Text primitives: code point ↔ character.
"""

from strictbuiltins.core.text.character_codec import CODE_POINT_LIMIT, code_point, to_char

__all__ = [
    "CODE_POINT_LIMIT",
    "code_point",
    "to_char",
]
