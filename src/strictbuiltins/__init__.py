"""
strictbuiltins — встроенные функции со строго заданной семантикой

Публичные имена повторяют встроенные: int, divmod, hex, oct, bin, chr, ord,
range, zip, enumerate, iter, list, len, sum, filter, open_.

    >>> from strictbuiltins import int, divmod, range
    >>> int("-0x2a", 16)
    -42
    >>> divmod(-7, 2)
    (-4, 1)
    >>> range(0, 100, 3).count(3)
    1
"""

from strictbuiltins.core.domain.arithmetic_range import ArithmeticProgression, make_range
from strictbuiltins.core.errors import (
    BuiltinsError,
    DivisionByZero,
    ErrorKind,
    InvalidArgumentType,
    InvalidArgumentValue,
    Overflow,
    Unsupported,
)
from strictbuiltins.core.iteration.utilities import (
    Sequenceable,
    enumerate_from,
    filter_by,
    get_iterator,
    length_of,
    sum_of,
    to_list,
    zip_shortest,
)
from strictbuiltins.core.math.integer_parser import parse_int
from strictbuiltins.core.math.numeric_primitives import floor_divmod, to_bin, to_hex, to_oct
from strictbuiltins.core.text.character_codec import code_point, to_char
from strictbuiltins.io.text_stream import TextIOWrapper, open_

__version__ = "1.0.0"

# =============================================================================
# ИМЕНА ВСТРОЕННЫХ ФУНКЦИЙ
# =============================================================================

int = parse_int
divmod = floor_divmod
hex = to_hex
oct = to_oct
bin = to_bin
chr = to_char
ord = code_point
range = make_range
zip = zip_shortest
enumerate = enumerate_from
iter = get_iterator
list = to_list
len = length_of
sum = sum_of
filter = filter_by

__all__ = [
    # Builtin names
    "bin",
    "chr",
    "divmod",
    "enumerate",
    "filter",
    "hex",
    "int",
    "iter",
    "len",
    "list",
    "oct",
    "open_",
    "ord",
    "range",
    "sum",
    "zip",
    # Types
    "ArithmeticProgression",
    "Sequenceable",
    "TextIOWrapper",
    # Errors
    "BuiltinsError",
    "DivisionByZero",
    "ErrorKind",
    "InvalidArgumentType",
    "InvalidArgumentValue",
    "Overflow",
    "Unsupported",
]
