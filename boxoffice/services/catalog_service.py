"""
Event and ticket lifecycle operations over the record index
"""

import logging
import threading
from typing import Dict, List, Optional

from boxoffice.core.errors import DuplicateKey, SeatTaken, TicketNotFound, UnknownEvent
from boxoffice.models import Event, RecordKind, Ticket, event_key, ticket_key
from boxoffice.services.record_index import RecordIndex

logger = logging.getLogger(__name__)

class CatalogService:
    """Service enforcing cross-record rules before the index is mutated"""

    def __init__(self, index: Optional[RecordIndex] = None):
        self.index = index if index is not None else RecordIndex()
        # One lock around every operation; a cascading delete is a single
        # critical section against any other caller.
        self._lock = threading.RLock()

    def add_event(self, code: int, title: str, date: str, time: str) -> Event:
        """Register a new event; its code must not be in use"""
        key = event_key(code)
        with self._lock:
            if self.index.search(key) is not None:
                logger.warning(f"Rejected event {code}: code already exists")
                raise DuplicateKey(
                    f"An event with code {code} already exists",
                    {"event_code": code},
                )

            event = Event(code=code, title=title, date=date, time=time)
            self.index.insert(key, event)

        logger.info(f"Event {code} '{title}' added")
        return event

    def add_ticket(
        self,
        event_code: int,
        seat: str,
        tax_id: str,
        first_name: str,
        last_name: str,
    ) -> Ticket:
        """Issue a ticket for an existing event and a free seat"""
        key = ticket_key(event_code, seat)
        with self._lock:
            if self.index.search(event_key(event_code)) is None:
                logger.warning(f"Rejected ticket {seat}: event {event_code} does not exist")
                raise UnknownEvent(event_code)

            if self.index.search(key) is not None:
                logger.warning(f"Rejected ticket {seat}: already booked for event {event_code}")
                raise SeatTaken(event_code, seat)

            ticket = Ticket(
                event_code=event_code,
                seat=seat,
                tax_id=tax_id,
                first_name=first_name,
                last_name=last_name,
            )
            self.index.insert(key, ticket)

        logger.info(f"Ticket for seat {seat} issued for event {event_code}")
        return ticket

    def find_event(self, code: int) -> Optional[Event]:
        with self._lock:
            return self.index.search(event_key(code))

    def find_ticket(self, event_code: int, seat: str) -> Optional[Ticket]:
        with self._lock:
            return self.index.search(ticket_key(event_code, seat))

    def remove_event(self, code: int) -> int:
        """
        Delete an event together with every ticket booked against it.

        Ticket keys are snapshotted in full before the first deletion, since
        deleting reshapes the subtrees a live traversal would walk. Returns the
        number of tickets removed.
        """
        key = event_key(code)
        with self._lock:
            if self.index.search(key) is None:
                logger.warning(f"Rejected removal: event {code} does not exist")
                raise UnknownEvent(code)

            ticket_keys = self.index.collect_ticket_keys(code)
            for dependent in ticket_keys:
                self.index.delete(dependent)

            self.index.delete(key)

        logger.info(f"Event {code} removed with {len(ticket_keys)} tickets")
        return len(ticket_keys)

    def remove_ticket(self, event_code: int, seat: str) -> Ticket:
        """Cancel a single booking and return the removed ticket"""
        key = ticket_key(event_code, seat)
        with self._lock:
            if self.index.search(event_key(event_code)) is None:
                logger.warning(f"Rejected cancellation: event {event_code} does not exist")
                raise UnknownEvent(event_code)

            ticket = self.index.search(key)
            if ticket is None:
                logger.warning(f"Rejected cancellation: seat {seat} not booked for event {event_code}")
                raise TicketNotFound(event_code, seat)

            self.index.delete(key)

        logger.info(f"Ticket for seat {seat} cancelled for event {event_code}")
        return ticket

    def list_events(self) -> List[Event]:
        """All events in ascending key order"""
        with self._lock:
            return list(self.index.enumerate_records(RecordKind.EVENT))

    def list_tickets_for_event(self, code: int) -> List[Ticket]:
        """Tickets of one event in ascending key order"""
        with self._lock:
            if self.index.search(event_key(code)) is None:
                raise UnknownEvent(code)

            return list(self.index.enumerate_records(
                RecordKind.TICKET,
                lambda ticket: ticket.event_code == code,
            ))

    def stats(self) -> Dict[str, int]:
        with self._lock:
            events = sum(1 for _ in self.index.enumerate_records(RecordKind.EVENT))
            return {
                "events": events,
                "tickets": len(self.index) - events,
                "nodes": len(self.index),
                "height": self.index.height(),
            }

    def close(self) -> int:
        """Tear down the whole index; returns the number of records released"""
        with self._lock:
            released = self.index.clear()
        logger.info(f"Catalog closed, {released} records released")
        return released
