import pytest

from circulation.activity_log import UNAVAILABLE_NOTICE, ActivityLog
from circulation.book import Book
from circulation.exceptions import LogUnavailableError
from circulation.lending import LendingService
from circulation.member import Member


def test_append_writes_one_line_per_call(activity_log, log_path):
    assert activity_log.append("Added Book: B1") is True
    assert activity_log.append("Added Member: M1") is True

    assert log_path.read_text(encoding="utf-8") == "Added Book: B1\nAdded Member: M1\n"

def test_read_lines_missing_file(tmp_path):
    assert ActivityLog(tmp_path / "nope.txt").read_lines() == []

def test_write_raises_log_unavailable(tmp_path):
    # A directory cannot be opened for appending
    log = ActivityLog(tmp_path)
    with pytest.raises(LogUnavailableError):
        log.write("Added Book: B1")

def test_append_swallows_failure_and_notifies(tmp_path):
    notices = []
    log = ActivityLog(tmp_path / "missing_dir" / "log.txt", notify=notices.append)

    assert log.append("Added Book: B1") is False
    assert notices == [UNAVAILABLE_NOTICE]

def test_lending_survives_unwritable_log(tmp_path, capsys):
    log = ActivityLog(tmp_path / "missing_dir" / "log.txt")
    service = LendingService(activity_log=log, currency_symbol="$")

    service.add_book(Book("B1", "Dune", "Herbert"))
    service.add_member(Member("M1", "Alice"))
    service.issue("B1", "M1")
    receipt = service.return_book("B1", "M1", 2)

    assert receipt.fee == 4
    assert service.catalog.get("B1").issued is False
    assert capsys.readouterr().out.count(UNAVAILABLE_NOTICE) == 4

def test_default_path_comes_from_settings(monkeypatch):
    monkeypatch.setattr("circulation.activity_log.settings.log_file", "custom_log.txt")
    assert ActivityLog().path.name == "custom_log.txt"
