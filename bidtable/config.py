"""
Default settings for the bid table tools.

Every value here can be overridden per run through the CLI options in
`bidtable.cli`; the constants only supply the defaults.
"""

import os

# Number of buckets in a freshly constructed table. Fixed for the table's lifetime.
DEFAULT_SIZE = 179

# Base directory of the project (one level above the package folder)
BASE_DIR = os.path.dirname(os.path.dirname(__file__))

DEFAULT_CSV_PATH = os.path.join(BASE_DIR, "data", "eBid_Monthly_Sales_Dec_2016.csv")

# Bid id used by find/remove when none is given
DEFAULT_BID_ID = "98109"

# Column positions in the eBid monthly sales export
COLUMNS = {
    "title": 0,
    "id": 1,
    "amount": 4,
    "fund": 8,
}

CURRENCY_SYMBOL = "$"

# Longest bid id accepted as a key (CPython's default int/str conversion limit)
MAX_ID_DIGITS = 4300
