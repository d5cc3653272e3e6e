"""
Public API routes - no authentication required
"""

from fastapi import APIRouter, Depends, Request

from boxoffice.api.deps import get_catalog
from boxoffice.core.errors import UnknownEvent
from boxoffice.schemas.event import EventResponse
from boxoffice.schemas.ticket import TicketResponse
from boxoffice.services.catalog_service import CatalogService
from boxoffice.utils.security import rate_limiter, get_client_ip
from boxoffice.utils.responses import (
    success_response,
    error_response,
    catalog_error_response,
    rate_limit_error,
)

router = APIRouter()

def _check_rate_limit(request: Request):
    if not rate_limiter.allow(get_client_ip(request)):
        rate_limit_error()

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}

@router.get("/events")
async def list_events(
    request: Request,
    catalog: CatalogService = Depends(get_catalog)
):
    """List all events in key order"""
    _check_rate_limit(request)

    events = catalog.list_events()
    return success_response(
        message=f"{len(events)} events found",
        data=[EventResponse.model_validate(event).model_dump() for event in events]
    )

@router.get("/events/{code}")
async def get_event(
    code: int,
    request: Request,
    catalog: CatalogService = Depends(get_catalog)
):
    """Look up one event by code"""
    _check_rate_limit(request)

    event = catalog.find_event(code)
    if event is None:
        return error_response(
            message=f"No event found with code {code}",
            error_code="NOT_FOUND",
            status_code=404
        )

    return success_response(
        message="Event found",
        data=EventResponse.model_validate(event).model_dump()
    )

@router.get("/events/{code}/tickets")
async def list_event_tickets(
    code: int,
    request: Request,
    catalog: CatalogService = Depends(get_catalog)
):
    """List the tickets booked for an event"""
    _check_rate_limit(request)

    try:
        tickets = catalog.list_tickets_for_event(code)
    except UnknownEvent as e:
        return catalog_error_response(e)

    return success_response(
        message=f"{len(tickets)} tickets found for event {code}",
        data=[TicketResponse.model_validate(ticket).model_dump() for ticket in tickets]
    )

@router.get("/events/{code}/tickets/{seat}")
async def get_ticket(
    code: int,
    seat: str,
    request: Request,
    catalog: CatalogService = Depends(get_catalog)
):
    """Look up the booking for one seat"""
    _check_rate_limit(request)

    ticket = catalog.find_ticket(code, seat)
    if ticket is None:
        return error_response(
            message=f"No booking found for seat {seat} in event {code}",
            error_code="NOT_FOUND",
            status_code=404
        )

    return success_response(
        message="Ticket found",
        data=TicketResponse.model_validate(ticket).model_dump()
    )
