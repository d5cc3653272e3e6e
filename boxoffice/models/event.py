"""
Event record
"""

from dataclasses import dataclass
from typing import ClassVar

from boxoffice.models.keys import RecordKind, event_key

@dataclass(frozen=True)
class Event:
    code: int
    title: str
    date: str  # DD/MM/YYYY
    time: str  # HH:MM

    kind: ClassVar[RecordKind] = RecordKind.EVENT

    @property
    def key(self) -> str:
        return event_key(self.code)
