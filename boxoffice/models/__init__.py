"""
Record models package
"""

from typing import Union

from .keys import RecordKind, event_key, ticket_key
from .event import Event
from .ticket import Ticket

# A record is either variant; the class is the tag.
Record = Union[Event, Ticket]

__all__ = ["Event", "Ticket", "Record", "RecordKind", "event_key", "ticket_key"]
