"""
Input validation utilities for event and ticket data
"""

import re
from datetime import datetime

from boxoffice.core.config import settings
from boxoffice.core.errors import InvalidSeatFormat

DATE_FORMAT = "%d/%m/%Y"
DATE_PATTERN = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")
TIME_PATTERN = re.compile(r"([01][0-9]|2[0-3]):[0-5][0-9]")


class Validators:
    """Format checks applied before values reach the catalog"""

    @staticmethod
    def validate_seat(seat: str) -> bool:
        """
        Validate seat format.
        Pattern: section letter + seat number, e.g. "c149"
        Section is case-insensitive; number must be in 1..MAX_SEAT_NUMBER
        """
        if len(seat) < 2 or len(seat) > 4:
            return False

        if seat[0].lower() not in settings.SEAT_SECTIONS:
            return False

        number = seat[1:]
        if not number.isascii() or not number.isdigit():
            return False

        return 1 <= int(number) <= settings.MAX_SEAT_NUMBER

    @staticmethod
    def validate_date(date: str) -> bool:
        """Validate a DD/MM/YYYY calendar date"""
        if not DATE_PATTERN.fullmatch(date):
            return False
        try:
            datetime.strptime(date, DATE_FORMAT)
        except ValueError:
            return False
        return True

    @staticmethod
    def validate_time(time: str) -> bool:
        """Validate a 24-hour HH:MM time"""
        return bool(TIME_PATTERN.fullmatch(time))

    @staticmethod
    def validate_code(code: int) -> bool:
        return code >= 0


def seat_format_hint() -> str:
    sections = settings.SEAT_SECTIONS
    return f"Section '{sections[0]}'-'{sections[-1]}' and number 1-{settings.MAX_SEAT_NUMBER}."


def validate_seat_or_raise(seat: str) -> str:
    """Return ``seat`` unchanged, or raise InvalidSeatFormat"""
    if not Validators.validate_seat(seat):
        raise InvalidSeatFormat(seat, seat_format_hint())
    return seat
