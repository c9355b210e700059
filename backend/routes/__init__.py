"""FastAPI API endpoints under /api.

Endpoint groups: health/language, session (login, logout, hotel profile),
guests (registration + search), watchlist, messages (communication log),
reports (recency windows + CSV export). All groups act on the single
Console stored on ``app.state.console``.
"""

from fastapi import APIRouter

from .guests import router as guests_router
from .messages import router as messages_router
from .reports import router as reports_router
from .session import router as session_router
from .settings import router as settings_router
from .watchlist import router as watchlist_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(session_router)
router.include_router(guests_router)
router.include_router(watchlist_router)
router.include_router(messages_router)
router.include_router(reports_router)
