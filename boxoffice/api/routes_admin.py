"""
Admin API routes - requires authentication
"""

from fastapi import APIRouter, Depends

from boxoffice.api.deps import get_catalog
from boxoffice.core.errors import CatalogError
from boxoffice.schemas.event import EventCreate, EventResponse
from boxoffice.schemas.ticket import TicketCreate, TicketResponse
from boxoffice.services.catalog_service import CatalogService
from boxoffice.utils.security import verify_admin_token
from boxoffice.utils.responses import success_response, catalog_error_response
from boxoffice.utils.validators import validate_seat_or_raise

router = APIRouter()

@router.post("/events")
async def create_event(
    event_data: EventCreate,
    catalog: CatalogService = Depends(get_catalog),
    token: str = Depends(verify_admin_token)
):
    """Create a new event"""
    try:
        event = catalog.add_event(
            code=event_data.code,
            title=event_data.title,
            date=event_data.date,
            time=event_data.time
        )
    except CatalogError as e:
        return catalog_error_response(e)

    return success_response(
        message=f"Event '{event.title}' added successfully",
        data=EventResponse.model_validate(event).model_dump(),
        status_code=201
    )

@router.delete("/events/{code}")
async def delete_event(
    code: int,
    catalog: CatalogService = Depends(get_catalog),
    token: str = Depends(verify_admin_token)
):
    """Delete an event and every ticket booked for it"""
    try:
        removed = catalog.remove_event(code)
    except CatalogError as e:
        return catalog_error_response(e)

    return success_response(
        message=f"Event with code {code} and all its tickets have been deleted",
        data={"deleted_event_code": code, "deleted_tickets": removed}
    )

@router.post("/events/{code}/tickets")
async def issue_ticket(
    code: int,
    ticket_data: TicketCreate,
    catalog: CatalogService = Depends(get_catalog),
    token: str = Depends(verify_admin_token)
):
    """Issue a ticket for a seat"""
    try:
        ticket = catalog.add_ticket(
            event_code=code,
            seat=ticket_data.seat,
            tax_id=ticket_data.tax_id,
            first_name=ticket_data.first_name,
            last_name=ticket_data.last_name
        )
    except CatalogError as e:
        return catalog_error_response(e)

    return success_response(
        message=f"Ticket for seat {ticket.seat} issued successfully",
        data=TicketResponse.model_validate(ticket).model_dump(),
        status_code=201
    )

@router.delete("/events/{code}/tickets/{seat}")
async def cancel_ticket(
    code: int,
    seat: str,
    catalog: CatalogService = Depends(get_catalog),
    token: str = Depends(verify_admin_token)
):
    """Cancel the booking for one seat"""
    try:
        validate_seat_or_raise(seat)
        ticket = catalog.remove_ticket(code, seat)
    except CatalogError as e:
        return catalog_error_response(e)

    return success_response(
        message=f"Ticket for seat {seat} cancelled",
        data=TicketResponse.model_validate(ticket).model_dump()
    )

@router.get("/stats")
async def catalog_stats(
    catalog: CatalogService = Depends(get_catalog),
    token: str = Depends(verify_admin_token)
):
    """Record counts and index shape"""
    return success_response(
        message="Catalog statistics retrieved",
        data=catalog.stats()
    )
