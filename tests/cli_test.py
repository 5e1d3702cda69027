import os
import sys

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from bidtable import cli
from bidtable.datastructures import HashTable
from bidtable.models import Bid

CSV = (
    "Title,Auction ID,Auction Feedback,Auction Start Date,Winning Bid,"
    "Auction End Date,Department,Vehicle ID,Fund\n"
    "Park Ave,98109,,,$500.00,,,,F1\n"
    "Desk,1,,,$10.00,,,,General Fund\n"
    "Chair,180,,,$20.00,,,,Enterprise\n"
)


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "bids.csv"
    path.write_text(CSV, encoding="utf-8")
    return str(path)


def scripted(*answers):
    """Return an input() replacement that replays answers, then raises EOFError."""
    it = iter(answers)

    def _input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None
    return _input


def test_bid_display_format():
    assert Bid("98109", "Park Ave", "F1", 500.0).display() == "98109: Park Ave | 500.0 | F1"


def test_menu_works_before_any_load(csv_path, capsys):
    table = cli.run_menu(csv_path, 179, "98109", input_fn=scripted("2", "3", "", "4", "1", "9"))
    out = capsys.readouterr().out
    assert "No bids loaded." in out
    assert "Bid Id 98109 not found." in out
    assert "Good bye." in out
    assert len(table) == 0


def test_menu_load_find_remove(csv_path, capsys):
    table = cli.run_menu(
        csv_path, 179, "98109",
        input_fn=scripted("1", "3", "", "4", "1", "2", "9"),
    )
    out = capsys.readouterr().out
    assert "3 bids read" in out
    assert "98109: Park Ave | 500.0 | F1" in out
    assert "Bid Id 1 removed." in out
    assert "milliseconds" in out and "seconds" in out
    # remove left the bucket-mate in place
    assert [b.id for b in table.print_all()] == ["180", "98109"]
    assert table.search("1") is None
    assert len(table) == 2


def test_menu_reload_builds_fresh_table(csv_path):
    table = cli.run_menu(csv_path, 179, "98109", input_fn=scripted("1", "1", "9"))
    assert len(table) == 3


def test_menu_invalid_choice_and_eof(csv_path, capsys):
    cli.run_menu(csv_path, 179, "98109", input_fn=scripted("7"))
    out = capsys.readouterr().out
    assert "Invalid choice: '7'" in out
    assert out.rstrip().endswith("Good bye.")


def test_menu_load_missing_file(tmp_path, capsys):
    cli.run_menu(str(tmp_path / "missing.csv"), 179, "1", input_fn=scripted("1", "9"))
    assert "CSV file not found" in capsys.readouterr().out


def test_find_command(csv_path, capsys):
    assert cli.main(["--csv-path", csv_path, "find", "--bid-id", "98109"]) == 0
    assert "98109: Park Ave | 500.0 | F1" in capsys.readouterr().out
    assert cli.main(["--csv-path", csv_path, "find", "--bid-id", "99999"]) == 1
    assert "Bid Id 99999 not found." in capsys.readouterr().out


def test_remove_command(csv_path, capsys):
    assert cli.main(["--csv-path", csv_path, "remove", "--bid-id", "180"]) == 0
    assert cli.main(["--csv-path", csv_path, "remove", "--bid-id", "2"]) == 1


def test_show_command_lists_bucket_order(csv_path, capsys):
    assert cli.main(["--csv-path", csv_path, "show"]) == 0
    lines = [l for l in capsys.readouterr().out.splitlines() if ": " in l and "|" in l]
    ids = [l.split(":")[0] for l in lines]
    assert ids.index("1") < ids.index("180")
    assert len(ids) == 3


def test_stats_command(csv_path, capsys):
    assert cli.main(["--csv-path", csv_path, "--capacity", "179", "stats"]) == 0
    out = capsys.readouterr().out
    assert "bids: 3" in out
    assert "longest chain: 2" in out
    assert "empty slots: 177" in out


def test_missing_csv_exit_code(tmp_path, capsys):
    assert cli.main(["--csv-path", str(tmp_path / "x.csv"), "show"]) == 2


def test_capacity_must_be_positive(csv_path):
    with pytest.raises(SystemExit):
        cli.main(["--csv-path", csv_path, "--capacity", "0", "show"])


def test_find_bid_helper_reports_time(capsys):
    table = HashTable()
    table.insert(Bid("7", "Lamp", "F", 1.0))
    assert cli.find_bid(table, "7").title == "Lamp"
    assert "time:" in capsys.readouterr().out


def test_show_survives_invalid_utf8_row(tmp_path, capsys):
    path = tmp_path / "bids.csv"
    path.write_bytes((CSV + "Caf\xe9,2,,,$5.00,,,,F\n").encode("latin-1"))
    assert cli.main(["--csv-path", str(path), "show"]) == 0
    out = capsys.readouterr().out
    assert "3 bids read" in out
    assert "1 rows skipped:" in out


def test_menu_accepts_positional_csv_path_and_bid_id(csv_path, monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "run_menu", lambda *a: calls.append(a))
    assert cli.main(["menu", csv_path, "180"]) == 0
    assert calls == [(csv_path, 179, "180")]


def test_menu_positionals_default_to_options(csv_path, monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "run_menu", lambda *a: calls.append(a))
    cli.main(["--csv-path", csv_path, "menu"])
    cli.main(["--csv-path", csv_path])
    assert calls == [(csv_path, 179, "98109"), (csv_path, 179, "98109")]
