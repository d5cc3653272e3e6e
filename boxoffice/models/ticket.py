"""
Ticket record
"""

from dataclasses import dataclass
from typing import ClassVar

from boxoffice.models.keys import RecordKind, ticket_key

@dataclass(frozen=True)
class Ticket:
    event_code: int
    seat: str  # e.g. "c149"
    tax_id: str
    first_name: str
    last_name: str

    kind: ClassVar[RecordKind] = RecordKind.TICKET

    @property
    def key(self) -> str:
        return ticket_key(self.event_code, self.seat)
