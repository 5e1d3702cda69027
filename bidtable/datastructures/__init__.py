from .linked_list import Chain
from .hash_table import HashTable, parse_key

__all__ = [
    "Chain",
    "HashTable",
    "parse_key",
]
