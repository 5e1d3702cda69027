"""
Bid Table Command-Line Interface (CLI)

Loads the eBid monthly sales export into a fixed-size chaining hash table
and exposes the table through subcommands or an interactive menu. It ties
together:
- Bid loader (CSV -> HashTable)
- HashTable operations (search, remove, enumerate)
- Wall-clock timing of load and find

Usage examples:
    python -m bidtable.cli                       # interactive menu
    python -m bidtable.cli --csv-path bids.csv show
    python -m bidtable.cli find --bid-id 98109
    python -m bidtable.cli --capacity 1009 stats
    python -m bidtable.cli menu bids.csv 98109    # positional csv path and bid id
"""

import argparse
import logging
import sys
import time

from . import config
from .dao.bid_loader import load_bids
from .datastructures import HashTable
from .errors import BidTableError

log = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Utility: output and timing
# -------------------------------------------------------------------
def print_bids(table):
    """Display every bid in table order."""
    count = 0
    for bid in table.print_all():
        print(bid.display())
        count += 1
    if not count:
        print("No bids loaded.")


def timed(fn, *args, **kwargs):
    """Call fn and return (result, elapsed seconds)."""
    start = time.perf_counter()
    result = fn(*args, **kwargs)
    return result, time.perf_counter() - start


def report_time(elapsed):
    print(f"time: {elapsed * 1000:.3f} milliseconds")
    print(f"time: {elapsed:.6f} seconds")


def load_into(table, csv_path):
    """Load csv_path into table and print a summary; None when the file cannot be read."""
    try:
        result, elapsed = timed(load_bids, csv_path, table)
    except FileNotFoundError:
        print(f"CSV file not found: {csv_path}")
        return None
    except (OSError, BidTableError) as e:
        print(f"Could not load {csv_path}: {e}")
        return None
    print_load_summary(result)
    report_time(elapsed)
    return result


def print_load_summary(result):
    print(f"{result.loaded} bids read")
    if result.skipped:
        print(f"{len(result.skipped)} rows skipped:")
        for notice in result.skipped:
            print(f"  {notice}")


def find_bid(table, bid_id):
    """Search for bid_id, print the outcome and elapsed time; return the bid or None."""
    bid, elapsed = timed(table.search, bid_id)
    if bid is not None:
        print(bid.display())
    else:
        print(f"Bid Id {bid_id} not found.")
    report_time(elapsed)
    return bid


def remove_bid(table, bid_id):
    removed = table.remove(bid_id)
    if removed:
        print(f"Bid Id {bid_id} removed.")
    else:
        print(f"Bid Id {bid_id} not found.")
    return removed


# -------------------------------------------------------------------
# Interactive menu
# -------------------------------------------------------------------
MENU = (
    "Menu:\n"
    "  1. Load Bids\n"
    "  2. Display All Bids\n"
    "  3. Find Bid\n"
    "  4. Remove Bid\n"
    "  9. Exit"
)


def prompt_bid_id(input_fn, default):
    """Ask for a bid id; blank input or EOF falls back to default."""
    try:
        answer = input_fn(f"Enter Bid Id [{default}]: ").strip()
    except EOFError:
        return default
    return answer or default


def run_menu(csv_path, capacity, bid_id, input_fn=input):
    """Run the interactive menu until the user exits. Returns the final table.

    The table starts out empty, so display/find/remove work before any load.
    """
    table = HashTable(capacity)
    while True:
        print(MENU)
        try:
            choice = input_fn("Enter choice: ").strip()
        except EOFError:
            break

        if choice == "1":
            # Each load starts from a fresh table
            table = HashTable(capacity)
            load_into(table, csv_path)
        elif choice == "2":
            print_bids(table)
        elif choice == "3":
            find_bid(table, prompt_bid_id(input_fn, bid_id))
        elif choice == "4":
            remove_bid(table, prompt_bid_id(input_fn, bid_id))
        elif choice == "9":
            break
        else:
            print(f"Invalid choice: {choice!r}")

    print("Good bye.")
    return table


# -------------------------------------------------------------------
# Command handlers
# -------------------------------------------------------------------
def _loaded_table(args):
    table = HashTable(args.capacity)
    if load_into(table, args.csv_path) is None:
        return None
    return table


def cmd_menu(args):
    """Interactive menu over a single table."""
    run_menu(args.csv_file or args.csv_path, args.capacity, args.search_id or args.bid_id)
    return 0


def cmd_show(args):
    """Load the CSV and print every bid."""
    table = _loaded_table(args)
    if table is None:
        return 2
    print_bids(table)
    return 0


def cmd_find(args):
    """Load the CSV and look up one bid id."""
    table = _loaded_table(args)
    if table is None:
        return 2
    return 0 if find_bid(table, args.bid_id) is not None else 1


def cmd_remove(args):
    """Load the CSV and remove one bid id."""
    table = _loaded_table(args)
    if table is None:
        return 2
    return 0 if remove_bid(table, args.bid_id) else 1


def cmd_stats(args):
    """Load the CSV and print bucket usage figures."""
    table = _loaded_table(args)
    if table is None:
        return 2
    sizes = table.bucket_sizes()
    print(f"bids: {len(table)}")
    print(f"capacity: {table.capacity}")
    print(f"load factor: {table.load_factor:.3f}")
    print(f"longest chain: {max(sizes)}")
    print(f"empty slots: {sizes.count(0)}")
    return 0


# -------------------------------------------------------------------
# CLI parser setup
# -------------------------------------------------------------------
def _positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return value


def build_parser():
    """Build the argparse command-line parser with subcommands."""
    p = argparse.ArgumentParser(prog="python -m bidtable.cli", description="Bid hash table CLI")
    p.add_argument("--csv-path", default=config.DEFAULT_CSV_PATH)
    p.add_argument("--capacity", type=_positive_int, default=config.DEFAULT_SIZE)
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.set_defaults(func=cmd_menu, bid_id=config.DEFAULT_BID_ID, csv_file=None, search_id=None)
    sub = p.add_subparsers(dest="cmd")

    s = sub.add_parser("menu", help="Interactive menu (default)")
    s.add_argument("csv_file", nargs="?", help="CSV path (same as --csv-path)")
    s.add_argument("search_id", nargs="?", help="Bid id for find/remove (same as --bid-id)")
    s.add_argument("--bid-id", default=config.DEFAULT_BID_ID)
    s.set_defaults(func=cmd_menu)

    s = sub.add_parser("show", help="Display all bids")
    s.set_defaults(func=cmd_show)

    s = sub.add_parser("find", help="Find a bid by id")
    s.add_argument("--bid-id", default=config.DEFAULT_BID_ID)
    s.set_defaults(func=cmd_find)

    s = sub.add_parser("remove", help="Remove a bid by id")
    s.add_argument("--bid-id", default=config.DEFAULT_BID_ID)
    s.set_defaults(func=cmd_remove)

    s = sub.add_parser("stats", help="Show bucket usage")
    s.set_defaults(func=cmd_stats)

    return p


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------
def main(argv=None):
    """CLI entry point when invoked via `python -m bidtable.cli`."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    log.debug("capacity=%d csv=%s", args.capacity, args.csv_path)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
