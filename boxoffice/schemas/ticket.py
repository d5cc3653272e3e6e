"""
Ticket-related Pydantic schemas
"""

from pydantic import BaseModel, Field, field_validator

from boxoffice.utils.validators import Validators, seat_format_hint

class TicketCreate(BaseModel):
    """Schema for issuing a ticket; the event code comes from the URL"""
    seat: str
    tax_id: str = Field(min_length=1)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)

    @field_validator("seat", "tax_id", "first_name", "last_name", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("seat")
    @classmethod
    def check_seat(cls, value: str) -> str:
        if not Validators.validate_seat(value):
            raise ValueError(f"Invalid seat. {seat_format_hint()}")
        return value

class TicketResponse(BaseModel):
    """Ticket fields in display order"""
    event_code: int
    seat: str
    first_name: str
    last_name: str
    tax_id: str
    
    class Config:
        from_attributes = True
