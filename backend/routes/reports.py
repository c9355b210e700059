"""Report endpoints: recency windows, purpose breakdown, CSV export."""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from lodging_watch import reports
from lodging_watch.console import Console

from .models import get_console

router = APIRouter()


def _window_guests(console: Console, window: str):
    try:
        return reports.filter_by_recency(console.guests, window)
    except ValueError as e:
        raise HTTPException(400, str(e))


@router.get("/reports/{window}")
async def get_report(window: str, console: Console = Depends(get_console)):
    """Guests in the window plus purpose counts and the number of alerts."""
    guests = _window_guests(console, window)
    return {
        "window": window,
        "total": len(guests),
        "purpose_counts": reports.purpose_counts(guests),
        "alert_count": reports.alert_count(console.messages),
        "guests": guests,
    }


@router.get("/reports/{window}/csv", response_class=PlainTextResponse)
async def export_report(window: str, console: Console = Depends(get_console)):
    """CSV export of the guests in the window."""
    guests = _window_guests(console, window)
    return PlainTextResponse(
        reports.export_csv(guests),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="report_{window}.csv"'},
    )
