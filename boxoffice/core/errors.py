"""
Catalog error kinds

Every failure is a local precondition failure: the operation aborts and the
index is left as it was before the call.
"""

from typing import Optional


class CatalogError(Exception):
    """Base class for catalog precondition failures"""

    error_code = "CATALOG_ERROR"

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DuplicateKey(CatalogError):
    """An add operation targets a key that is already present"""

    error_code = "DUPLICATE_KEY"


class UnknownEvent(CatalogError):
    """An operation references an event code that does not exist"""

    error_code = "UNKNOWN_EVENT"

    def __init__(self, code: int):
        super().__init__(f"No event exists with code {code}", {"event_code": code})
        self.code = code


class SeatTaken(CatalogError):
    """The (event code, seat) pair is already booked"""

    error_code = "SEAT_TAKEN"

    def __init__(self, event_code: int, seat: str):
        super().__init__(
            f"Seat {seat} is already booked for event {event_code}",
            {"event_code": event_code, "seat": seat},
        )
        self.event_code = event_code
        self.seat = seat


class TicketNotFound(CatalogError):
    """No booking exists for the (event code, seat) pair"""

    error_code = "TICKET_NOT_FOUND"

    def __init__(self, event_code: int, seat: str):
        super().__init__(
            f"No booking found for seat {seat} in event {event_code}",
            {"event_code": event_code, "seat": seat},
        )
        self.event_code = event_code
        self.seat = seat


class InvalidSeatFormat(CatalogError):
    """Seat string fails the section/number format"""

    error_code = "INVALID_SEAT_FORMAT"

    def __init__(self, seat: str, hint: str = "Section 'a'-'h' and number 1-500."):
        super().__init__(f"Invalid seat '{seat}'. {hint}", {"seat": seat})
        self.seat = seat
