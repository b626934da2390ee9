"""
E23 Suite Hub - FastAPI Backend
Main application entry point
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

import redis.asyncio as redis
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, RedirectResponse
import uvicorn

from suitehub.api import routes_admin, routes_public, routes_rsvp, ws
from suitehub.core.config import settings
from suitehub.core.errors import DomainError
from suitehub.core.roster import MEMBERS
from suitehub.core.templating import templates
from suitehub.services.event_service import EventService
from suitehub.services.rsvp_service import RSVPService
from suitehub.services.store_client import get_store, get_store_client, ping
from suitehub.utils.responses import domain_error_response, error_response
from suitehub.utils.security import is_admin
from suitehub.utils.time_windows import utc_now

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    store = get_store_client()
    if await ping(store):
        logger.info("Key-value store reachable")
    else:
        logger.warning("Key-value store unavailable; pages will show no events")
    yield
    if store is not None:
        await store.aclose()
    logger.info("Application shutdown")

# Create FastAPI application
app = FastAPI(
    title="E23 Suite Hub",
    description="Events calendar, RSVPs and admin panel for suite E23",
    version="1.0.0",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    return domain_error_response(exc)

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = f"{field}: {first.get('msg')}" if field else "Invalid request"
    return error_response(
        message=message,
        error_code="VALIDATION_ERROR",
        details=errors,
        status_code=422
    )

# Include routers
app.include_router(routes_public.router, tags=["public"])
app.include_router(routes_rsvp.router, prefix="/api", tags=["rsvp"])
app.include_router(routes_admin.router, prefix="/admin", tags=["admin"])
app.include_router(ws.router, prefix="/ws", tags=["websocket"])

@app.get("/", response_class=HTMLResponse)
async def home(request: Request, store: Optional[redis.Redis] = Depends(get_store)):
    """Home page with the tonight widget and the member roster"""
    now = utc_now()
    event = await EventService.tonight(store, now)
    is_tonight = event is not None
    if event is None:
        event = await EventService.next_event(store, now)
    rsvps = await RSVPService.list_for_event(store, event.id) if event else None

    return templates.TemplateResponse(request, "index.html", {
        "title": "Welcome to E23",
        "event": event,
        "is_tonight": is_tonight,
        "rsvps": rsvps,
        "members": MEMBERS,
        "tz": settings.local_tz,
    })

@app.get("/events", response_class=HTMLResponse)
async def events_page(request: Request, store: Optional[redis.Redis] = Depends(get_store)):
    """Upcoming events with RSVP counts, then past events"""
    now = utc_now()
    upcoming = await EventService.list_upcoming(store, now)
    past = await EventService.list_past(store, now)
    counts = await asyncio.gather(*(RSVPService.list_for_event(store, e.id) for e in upcoming))
    summaries = dict(zip((e.id for e in upcoming), counts))

    return templates.TemplateResponse(request, "events.html", {
        "title": "Events",
        "upcoming": upcoming,
        "past": past,
        "summaries": summaries,
        "tz": settings.local_tz,
    })

@app.get("/admin/login", response_class=HTMLResponse)
async def login_page(request: Request):
    return templates.TemplateResponse(request, "login.html", {
        "title": "Admin Login",
        "error": None,
    })

@app.get("/admin", response_class=HTMLResponse)
async def admin_panel(
    request: Request,
    admin: bool = Depends(is_admin),
    store: Optional[redis.Redis] = Depends(get_store)
):
    """Admin panel for creating, editing and deleting events"""
    if not admin:
        return RedirectResponse(url="/admin/login", status_code=303)

    return templates.TemplateResponse(request, "admin.html", {
        "title": "E23 Admin",
        "events": await EventService.list_all(store),
        "tz": settings.local_tz,
    })

# Note: Run this ASGI app directly with Uvicorn or Hypercorn. For Gunicorn,
# use `uvicorn.workers.UvicornWorker` instead of wrapping the app.

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="127.0.0.1",
        port=8000,
        reload=True
    )
