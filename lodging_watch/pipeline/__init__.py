"""Guest registration pipeline.

Runs one front-desk registration end-to-end:
  1. Resolve the registering node (hotel profile, or placeholders).
  2. Build the GuestRecord: fresh id, current timestamp, status "sent".
  3. Match the guest's full name against the watchlist.
  4. On a match, synthesize one alert message from the system bot.
  5. Prepend guest (and alert) to the state and persist it.
"""

from .registration import (  # noqa: F401
    FALLBACK_ORIGIN_ADDRESS,
    FALLBACK_ORIGIN_NAME,
    RegistrationResult,
    alert_text,
    register,
    resolve_origin,
)
