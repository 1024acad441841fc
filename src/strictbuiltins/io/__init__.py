"""
Файлоподобные потоки поверх key-value хранилищ.
"""

from strictbuiltins.io.text_stream import OpenMode, TextIOWrapper, open_

__all__ = ["OpenMode", "TextIOWrapper", "open_"]
