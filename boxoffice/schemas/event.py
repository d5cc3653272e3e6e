"""
Event-related Pydantic schemas
"""

from pydantic import BaseModel, Field, field_validator

from boxoffice.utils.validators import Validators

class EventCreate(BaseModel):
    """Schema for creating an event"""
    code: int = Field(ge=0)
    title: str = Field(min_length=1)
    date: str
    time: str

    @field_validator("title", "date", "time", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("date")
    @classmethod
    def check_date(cls, value: str) -> str:
        if not Validators.validate_date(value):
            raise ValueError("date must be a valid DD/MM/YYYY date")
        return value

    @field_validator("time")
    @classmethod
    def check_time(cls, value: str) -> str:
        if not Validators.validate_time(value):
            raise ValueError("time must be HH:MM (24-hour)")
        return value

class EventResponse(BaseModel):
    """Event fields in display order"""
    code: int
    title: str
    date: str
    time: str
    
    class Config:
        from_attributes = True
