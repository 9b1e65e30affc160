"""FastAPI endpoints for the calculator panel.

Routes
------
POST   /calculators               Start a new calculator session
GET    /calculators               List session ids
GET    /calculators/{id}          Current panel (display, state, grid)
POST   /calculators/{id}/press    Press one button
POST   /calculators/{id}/clear    Press Clear
DELETE /calculators/{id}          End a session
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from buttons import CLEAR
from models import Panel, PressRequest
from store import SessionNotFoundError, SessionStore

log = logging.getLogger("calculator.api")

router = APIRouter(prefix="/calculators", tags=["calculators"])

# The store instance is injected by the app factory (see app.py).
_store: SessionStore | None = None


def set_store(store: SessionStore) -> None:
    """Inject the store instance. Called once at app startup."""
    global _store
    _store = store


def get_store() -> SessionStore:
    assert _store is not None, "Store not initialized"
    return _store


class SessionListResponse(BaseModel):
    ids: list[str]
    total: int


def _not_found(session_id: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Session not found: {session_id}")


def _panel(session_id: str) -> Panel:
    try:
        calculator = get_store().get(session_id)
    except SessionNotFoundError:
        raise _not_found(session_id)
    return Panel.build(session_id, calculator)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("", response_model=Panel, status_code=201)
def create_session() -> Panel:
    """Start a calculator showing "0"."""
    session_id, calculator = get_store().create()
    return Panel.build(session_id, calculator)


@router.get("", response_model=SessionListResponse)
def list_sessions() -> SessionListResponse:
    store = get_store()
    return SessionListResponse(ids=store.ids(), total=store.count())


@router.get("/{session_id}", response_model=Panel)
def get_panel(session_id: str) -> Panel:
    return _panel(session_id)


@router.post("/{session_id}/press", response_model=Panel)
def press_button(session_id: str, payload: PressRequest) -> Panel:
    """Dispatch one button press and return the redrawn panel."""
    try:
        calculator = get_store().get(session_id)
    except SessionNotFoundError:
        raise _not_found(session_id)
    calculator.dispatch(payload.to_button())
    log.debug("Session %s pressed %s -> %s", session_id, payload.button, calculator.display)
    return Panel.build(session_id, calculator)


@router.post("/{session_id}/clear", response_model=Panel)
def clear_session(session_id: str) -> Panel:
    try:
        calculator = get_store().get(session_id)
    except SessionNotFoundError:
        raise _not_found(session_id)
    calculator.dispatch(CLEAR)
    return Panel.build(session_id, calculator)


@router.delete("/{session_id}", response_model=Panel)
def delete_session(session_id: str) -> Panel:
    """End a session and return its last panel."""
    try:
        calculator = get_store().delete(session_id)
    except SessionNotFoundError:
        raise _not_found(session_id)
    return Panel.build(session_id, calculator)
