"""
Tests for the console menu shell
"""

import pytest

from boxoffice.console import ConsoleShell, format_event, format_ticket, read_int
from boxoffice.models import Event, Ticket
from boxoffice.services.catalog_service import CatalogService

def feed(monkeypatch, *lines):
    """Script the answers given to input()"""
    answers = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

@pytest.fixture
def shell():
    return ConsoleShell(CatalogService())

def test_read_int_returns_minus_one_on_garbage(monkeypatch):
    """Test integer parsing of console input"""
    feed(monkeypatch, " 42 ", "abc", "")
    assert read_int("> ") == 42
    assert read_int("> ") == -1
    assert read_int("> ") == -1

def test_format_records():
    """Test the display field order"""
    event_text = format_event(Event(code=101, title="Yoga", date="01/01/2025", time="10:00"))
    ticket_text = format_ticket(Ticket(event_code=101, seat="c149", tax_id="123", first_name="Eleni", last_name="Markou"))

    assert event_text.splitlines()[1:5] == [
        "  Event Code: 101",
        "  Title: Yoga",
        "  Date: 01/01/2025",
        "  Time: 10:00",
    ]
    assert ticket_text.splitlines()[1:6] == [
        "  Event (Code): 101",
        "  Seat: c149",
        "  First Name: Eleni",
        "  Last Name: Markou",
        "  Tax ID: 123",
    ]

def test_full_session(shell, monkeypatch, capsys):
    """Test a session that adds, books, lists and deletes"""
    feed(
        monkeypatch,
        "1",                                          # manage events
        "1", "101", "Yoga", "01/01/2025", "10:00",    # add event
        "4",                                          # list events
        "5",                                          # back
        "2",                                          # manage tickets
        "1", "101", "c149", "123456789", "Eleni", "Markou",  # issue ticket
        "1", "101", "c149",                           # same seat again
        "3", "101",                                   # list tickets
        "5",                                          # back
        "1",                                          # manage events
        "3", "101",                                   # delete event
        "2", "101",                                   # search event
        "5",                                          # back
        "3",                                          # exit
    )

    shell.run()
    out = capsys.readouterr().out

    assert "-> Event 'Yoga' added successfully." in out
    assert "  Title: Yoga" in out
    assert "-> Ticket for seat c149 issued successfully." in out
    assert "(!) Error: Seat c149 is already booked for this event." in out
    assert "--- LIST OF TICKETS FOR EVENT 101 ---" in out
    assert "-> Deleted 1 tickets associated with the event." in out
    assert "(!) No event found with code 101." in out
    assert "Program terminated successfully." in out
    assert len(shell.catalog.index) == 0

def test_invalid_inputs_are_reported(shell, monkeypatch, capsys):
    """Test rejected codes, seats, dates and menu choices"""
    shell.catalog.add_event(1, "Zumba", "05/03/2025", "17:00")
    feed(
        monkeypatch,
        "9",                                # bad main menu choice
        "1",
        "1", "x",                           # non-numeric code
        "1", "1",                           # duplicate code
        "1", "2", "Pilates", "31/02/2025",  # impossible date
        "5",
        "2",
        "1", "7",                           # unknown event
        "1", "1", "z99",                    # bad seat
        "3", "8",                           # list tickets of unknown event
        "4", "1", "a1",                     # cancel a free seat
        "5",
        "3",
    )

    shell.run()
    out = capsys.readouterr().out

    assert "(!) Invalid choice. Please try again." in out
    assert "(!) Invalid code." in out
    assert "(!) Error: An event with this code already exists." in out
    assert "(!) Error: Invalid date. Use DD/MM/YYYY." in out
    assert "(!) Error: No event exists with code 7." in out
    assert "(!) Error: Invalid seat. Section 'a'-'h' and number 1-500." in out
    assert "(!) Error: No event exists with code 8." in out
    assert "(!) Error: No booking found for seat a1 in event 1" in out
    assert shell.catalog.find_event(2) is None

def test_cancel_and_find_ticket(shell, monkeypatch, capsys):
    """Test ticket search and cancellation screens"""
    shell.catalog.add_event(3, "Spinning", "03/01/2025", "18:00")
    shell.catalog.add_ticket(3, "b7", "42", "Anna", "Kara")
    feed(
        monkeypatch,
        "2",
        "2", "3", "b7",     # find ticket
        "4", "3", "b7",     # cancel it
        "2", "3", "b7",     # find again
        "5",
        "3",
    )

    shell.run()
    out = capsys.readouterr().out

    assert "-> Ticket found:" in out
    assert "  First Name: Anna" in out
    assert "-> Ticket for seat b7 cancelled." in out
    assert "(!) No booking found for seat b7 in event 3." in out

def test_exit_tears_down_index(shell, monkeypatch, capsys):
    """Test that leaving the program releases every record"""
    shell.catalog.add_event(1, "Zumba", "05/03/2025", "17:00")
    shell.catalog.add_ticket(1, "a1", "1", "A", "B")
    feed(monkeypatch, "3")

    shell.run()

    assert "Deleting all data and terminating the program..." in capsys.readouterr().out
    assert shell.catalog.index.root is None

def test_negative_code_is_rejected(shell, monkeypatch, capsys):
    """Test that event codes must be non-negative"""
    feed(monkeypatch, "1", "1", "-5", "5", "3")

    shell.run()

    assert "(!) Invalid code." in capsys.readouterr().out
    assert len(shell.catalog.index) == 0
