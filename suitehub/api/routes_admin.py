"""
Admin API routes - requires authentication
"""

import logging
from typing import Optional

import redis.asyncio as redis
from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from suitehub.api.ws import revalidate_path
from suitehub.core.errors import (
    EventNotFoundError,
    InvalidCredentialsError,
    StoreUnavailableError,
    ValidationError,
)
from suitehub.core.templating import templates
from suitehub.schemas.auth import LoginRequest
from suitehub.schemas.event import EventCreate, EventUpdate
from suitehub.services.auth_service import AuthService
from suitehub.services.event_service import EventService
from suitehub.services.store_client import get_store
from suitehub.utils.responses import success_response, error_response, domain_error_response
from suitehub.utils.security import (
    clear_session_cookie,
    get_session_token,
    require_admin,
    set_session_cookie,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ADMIN_VIEWS = ("/events", "/admin", "/")

async def read_login_password(request: Request) -> str:
    """Password from a JSON body or a submitted form"""
    if request.headers.get("content-type", "").startswith("application/json"):
        try:
            return LoginRequest.model_validate(await request.json()).password
        except ValueError:
            # malformed JSON or a non-string password
            return ""
    form = await request.form()
    return str(form.get("password", ""))

@router.post("/login")
async def login(
    request: Request,
    password: str = Depends(read_login_password),
    store: Optional[redis.Redis] = Depends(get_store)
):
    """Check the admin password and start a session"""
    try:
        token = await AuthService(store).login(password)
    except (ValidationError, InvalidCredentialsError) as e:
        error, status_code = e.message, 401
    except StoreUnavailableError as e:
        logger.error(f"Login failed: {e}")
        error, status_code = "Login is unavailable right now", 503
    else:
        response = RedirectResponse(url="/admin", status_code=303)
        set_session_cookie(response, token)
        return response

    return templates.TemplateResponse(
        request,
        "login.html",
        {"title": "Admin Login", "error": error},
        status_code=status_code
    )

@router.post("/logout")
async def logout(
    token: Optional[str] = Depends(get_session_token),
    store: Optional[redis.Redis] = Depends(get_store)
):
    """End the session and clear the cookie, whether or not it was valid"""
    await AuthService(store).logout(token)
    response = RedirectResponse(url="/admin/login", status_code=303)
    clear_session_cookie(response)
    return response

@router.get("/api/events", dependencies=[Depends(require_admin)])
async def list_all_events(store: Optional[redis.Redis] = Depends(get_store)):
    """Every event, past and upcoming, by date"""
    return success_response(
        message="Events retrieved successfully",
        data=await EventService.list_all(store)
    )

@router.post("/api/events", dependencies=[Depends(require_admin)])
async def create_event(
    event_data: EventCreate,
    store: Optional[redis.Redis] = Depends(get_store)
):
    """Create a new event"""
    try:
        event = await EventService.create(store, event_data)
    except ValidationError as e:
        return domain_error_response(e)
    except StoreUnavailableError as e:
        logger.error(f"Create event error: {e}")
        return error_response(message="Failed to create event", error_code=e.code.value, status_code=500)

    await revalidate_path(*ADMIN_VIEWS)

    return success_response(
        message="Event created successfully",
        data=event,
        status_code=201
    )

@router.patch("/api/events/{event_id}", dependencies=[Depends(require_admin)])
async def update_event(
    event_id: str,
    event_update: EventUpdate,
    store: Optional[redis.Redis] = Depends(get_store)
):
    """Update fields of an existing event"""
    try:
        event = await EventService.update(store, event_id, event_update)
    except (ValidationError, EventNotFoundError) as e:
        return domain_error_response(e)
    except StoreUnavailableError as e:
        logger.error(f"Update event error: {e}")
        return error_response(message="Failed to update event", error_code=e.code.value, status_code=500)

    await revalidate_path(*ADMIN_VIEWS)

    return success_response(
        message="Event updated successfully",
        data=event
    )

@router.delete("/api/events/{event_id}", dependencies=[Depends(require_admin)])
async def delete_event(
    event_id: str,
    store: Optional[redis.Redis] = Depends(get_store)
):
    """Delete an event together with its RSVPs"""
    try:
        deleted = await EventService.delete(store, event_id)
    except StoreUnavailableError as e:
        logger.error(f"Delete event error: {e}")
        return error_response(message="Failed to delete event", error_code=e.code.value, status_code=500)

    if deleted:
        await revalidate_path(*ADMIN_VIEWS)

    return success_response(
        message="Event deleted successfully" if deleted else "Event was already gone",
        data={"deleted_event_id": event_id, "deleted": deleted}
    )
