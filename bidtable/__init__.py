from .models import Bid
from .errors import BidTableError, InvalidKeyError, BidParseError
from .datastructures import HashTable, Chain, parse_key

__all__ = [
    "Bid",
    "BidTableError",
    "InvalidKeyError",
    "BidParseError",
    "HashTable",
    "Chain",
    "parse_key",
]
