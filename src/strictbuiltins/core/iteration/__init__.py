"""
Iteration utilities over any Sequenceable.
"""

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

__all__ = [
    # Capability
    "Sequenceable",
    # Functions
    "enumerate_from",
    "filter_by",
    "get_iterator",
    "length_of",
    "sum_of",
    "to_list",
    "zip_shortest",
]
