"""
Text-based menu shell for the box office
"""

import logging
import sys
from typing import Optional

from boxoffice.core.config import settings
from boxoffice.core.errors import CatalogError
from boxoffice.models import Event, Ticket
from boxoffice.services.catalog_service import CatalogService
from boxoffice.utils.validators import Validators, seat_format_hint

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 40


def read_int(prompt: str) -> int:
    """Read an integer, returning -1 when the input does not parse"""
    raw = input(prompt).strip()
    try:
        return int(raw)
    except ValueError:
        return -1


def read_text(prompt: str) -> str:
    return input(prompt).strip()


def format_event(event: Event) -> str:
    return "\n".join([
        SEPARATOR,
        f"  Event Code: {event.code}",
        f"  Title: {event.title}",
        f"  Date: {event.date}",
        f"  Time: {event.time}",
        SEPARATOR,
    ])


def format_ticket(ticket: Ticket) -> str:
    return "\n".join([
        SEPARATOR,
        f"  Event (Code): {ticket.event_code}",
        f"  Seat: {ticket.seat}",
        f"  First Name: {ticket.first_name}",
        f"  Last Name: {ticket.last_name}",
        f"  Tax ID: {ticket.tax_id}",
        SEPARATOR,
    ])


class ConsoleShell:
    """Menu loop calling into the catalog with validated values"""

    def __init__(self, catalog: Optional[CatalogService] = None):
        self.catalog = catalog if catalog is not None else CatalogService()

    def _read_code(self, prompt: str) -> Optional[int]:
        code = read_int(prompt)
        if not Validators.validate_code(code):
            print("(!) Invalid code.")
            return None
        return code

    def run(self):
        """Main application loop; exiting tears down every record"""
        while True:
            print("\n--- BOX OFFICE MAIN MENU ---")
            print("1. Manage Events")
            print("2. Manage Tickets")
            print("3. Exit and Delete All Data")
            choice = read_int("Select [1-3]: ")

            if choice == 1:
                self.event_menu()
            elif choice == 2:
                self.ticket_menu()
            elif choice == 3:
                print("Deleting all data and terminating the program...")
                self.catalog.close()
                break
            else:
                print("(!) Invalid choice. Please try again.")

        print("Program terminated successfully.")

    def event_menu(self):
        actions = {
            1: self.add_event_screen,
            2: self.find_event_screen,
            3: self.remove_event_screen,
            4: self.list_events_screen,
        }
        while True:
            print("\n--- Event Management Menu ---")
            print("1. Add Event")
            print("2. Search for Event (by Code)")
            print("3. Delete Event (by Code)")
            print("4. Print List of Events")
            print("5. Return to Main Menu")
            choice = read_int("Select [1-5]: ")

            if choice == 5:
                return
            action = actions.get(choice)
            if action is None:
                print("(!) Invalid choice.")
            else:
                action()

    def ticket_menu(self):
        actions = {
            1: self.add_ticket_screen,
            2: self.find_ticket_screen,
            3: self.list_tickets_screen,
            4: self.cancel_ticket_screen,
        }
        while True:
            print("\n--- Ticket Management Menu ---")
            print("1. Issue Ticket")
            print("2. Search for Ticket (by Seat & Event Code)")
            print("3. Print List of Tickets for an Event")
            print("4. Cancel Ticket")
            print("5. Return to Main Menu")
            choice = read_int("Select [1-5]: ")

            if choice == 5:
                return
            action = actions.get(choice)
            if action is None:
                print("(!) Invalid choice.")
            else:
                action()

    # -------- Events --------

    def add_event_screen(self):
        print("\n--- Add New Event ---")
        code = self._read_code("Enter event code (integer): ")
        if code is None:
            return

        if self.catalog.find_event(code) is not None:
            print("(!) Error: An event with this code already exists.")
            return

        title = read_text("Enter event title: ")
        date = read_text("Enter date (DD/MM/YYYY): ")
        if not Validators.validate_date(date):
            print("(!) Error: Invalid date. Use DD/MM/YYYY.")
            return
        time = read_text("Enter time (HH:MM): ")
        if not Validators.validate_time(time):
            print("(!) Error: Invalid time. Use HH:MM.")
            return

        try:
            event = self.catalog.add_event(code, title, date, time)
        except CatalogError as e:
            print(f"(!) Error: {e.message}")
            return
        print(f"-> Event '{event.title}' added successfully.")

    def find_event_screen(self):
        print("\n--- Search for Event ---")
        code = self._read_code("Enter event code to search for: ")
        if code is None:
            return

        event = self.catalog.find_event(code)
        if event is None:
            print(f"(!) No event found with code {code}.")
            return
        print("-> Event found:")
        print(format_event(event))

    def remove_event_screen(self):
        print("\n--- Delete Event ---")
        code = self._read_code("Enter event code to delete: ")
        if code is None:
            return

        try:
            removed = self.catalog.remove_event(code)
        except CatalogError:
            print(f"(!) No event found with code {code}.")
            return
        print(f"-> Deleted {removed} tickets associated with the event.")
        print(f"-> Event with code {code} and all its tickets have been deleted.")

    def list_events_screen(self):
        print("\n--- LIST OF ALL EVENTS ---")
        for event in self.catalog.list_events():
            print(format_event(event))
        print("--- END OF LIST ---")

    # -------- Tickets --------

    def add_ticket_screen(self):
        print("\n--- Issue Ticket ---")
        event_code = self._read_code("Enter event code: ")
        if event_code is None:
            return

        if self.catalog.find_event(event_code) is None:
            print(f"(!) Error: No event exists with code {event_code}.")
            return

        seat = read_text("Enter seat (e.g., c149): ")
        if not Validators.validate_seat(seat):
            print(f"(!) Error: Invalid seat. {seat_format_hint()}")
            return

        if self.catalog.find_ticket(event_code, seat) is not None:
            print(f"(!) Error: Seat {seat} is already booked for this event.")
            return

        tax_id = read_text("Enter spectator's Tax ID: ")
        first_name = read_text("Enter spectator's first name: ")
        last_name = read_text("Enter spectator's last name: ")

        try:
            ticket = self.catalog.add_ticket(event_code, seat, tax_id, first_name, last_name)
        except CatalogError as e:
            print(f"(!) Error: {e.message}")
            return
        print(f"-> Ticket for seat {ticket.seat} issued successfully.")

    def find_ticket_screen(self):
        print("\n--- Search for Ticket ---")
        event_code = self._read_code("Enter event code: ")
        if event_code is None:
            return

        seat = read_text("Enter seat number (e.g., c149): ")
        ticket = self.catalog.find_ticket(event_code, seat)
        if ticket is None:
            print(f"(!) No booking found for seat {seat} in event {event_code}.")
            return
        print("-> Ticket found:")
        print(format_ticket(ticket))

    def list_tickets_screen(self):
        print("\n--- Print Tickets for an Event ---")
        event_code = self._read_code("Enter event code: ")
        if event_code is None:
            return

        try:
            tickets = self.catalog.list_tickets_for_event(event_code)
        except CatalogError:
            print(f"(!) Error: No event exists with code {event_code}.")
            return

        print(f"\n--- LIST OF TICKETS FOR EVENT {event_code} ---")
        for ticket in tickets:
            print(format_ticket(ticket))
        print("--- END OF LIST ---")

    def cancel_ticket_screen(self):
        print("\n--- Cancel Ticket ---")
        event_code = self._read_code("Enter event code: ")
        if event_code is None:
            return

        seat = read_text("Enter seat number (e.g., c149): ")
        try:
            self.catalog.remove_ticket(event_code, seat)
        except CatalogError as e:
            print(f"(!) Error: {e.message}")
            return
        print(f"-> Ticket for seat {seat} cancelled.")


def main():
    """Console entry point"""
    logging.basicConfig(level=settings.LOG_LEVEL)
    shell = ConsoleShell()
    try:
        shell.run()
    except (KeyboardInterrupt, EOFError):
        shell.catalog.close()
        print("\n\nApplication terminated by user.")
        sys.exit(0)


if __name__ == "__main__":
    main()
