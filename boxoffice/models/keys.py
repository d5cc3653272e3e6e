"""
Composite index keys

Events and tickets share one keyspace. The textual prefixes keep the two
namespaces disjoint, and integers are written without padding, so ordering is
purely lexicographic ("E_10" sorts before "E_9").
"""

from enum import Enum

EVENT_PREFIX = "E_"
TICKET_PREFIX = "T_"


class RecordKind(str, Enum):
    """Tag naming which payload a record carries"""
    EVENT = "event"
    TICKET = "ticket"


def event_key(code: int) -> str:
    return f"{EVENT_PREFIX}{code}"


def ticket_key(event_code: int, seat: str) -> str:
    return f"{TICKET_PREFIX}{event_code}_{seat}"
