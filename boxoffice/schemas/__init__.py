"""
Pydantic schemas package
"""

from .common import *
from .event import *
from .ticket import *

__all__ = [
    "StandardResponse",
    "ErrorResponse",
    "EventCreate",
    "EventResponse",
    "TicketCreate",
    "TicketResponse",
]
