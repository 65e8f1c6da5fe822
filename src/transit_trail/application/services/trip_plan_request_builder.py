"""Trip plan request builder."""

import logging
from datetime import date, datetime, time
from zoneinfo import ZoneInfo

from transit_trail.application.services.partial_location_projector import to_partial
from transit_trail.domain.models.filters import (
    FilterCollection,
    FilterFamily,
    MaxTransfers,
    MaxTransferWait,
    MaxWalkTime,
    MinTransferWait,
    TimeMode,
    TripDate,
    TripMode,
    TripPlanFilter,
    TripTime,
    WalkSpeed,
)
from transit_trail.domain.models.location import Location
from transit_trail.domain.models.trip_plan_request import TripPlanRequest, Usage
from transit_trail.domain.ports.settings_provider import SettingsProvider

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "America/Winnipeg"


class TripPlanRequestBuilder:
    """Service for assembling trip plan requests from user input and settings."""

    def __init__(
        self,
        settings_provider: SettingsProvider,
        timezone: str = DEFAULT_TIMEZONE,
        usage: Usage = Usage.NORMAL,
    ) -> None:
        """Initialize with the settings source and the timezone "now" is read in."""
        self._settings_provider = settings_provider
        self._timezone = ZoneInfo(timezone)
        self._usage = usage

    def now(self) -> datetime:
        """Current time in the configured timezone."""
        return datetime.now(self._timezone)

    def build(
        self,
        origin: Location,
        destination: Location,
        on_date: date | None = None,
        at_time: time | None = None,
        mode: TimeMode = TimeMode.DEPART_AFTER,
        target_is_transit_api: bool = True,
    ) -> TripPlanRequest:
        """Build a request for plans from ``origin`` to ``destination``.

        Date defaults to today and time to the current hour and minute. The
        user's choices come first in the filter list, followed by the
        options derived from the trip planner settings.
        """
        if on_date is None or at_time is None:
            current = self.now()
            if on_date is None:
                on_date = current.date()
            if at_time is None:
                at_time = time(current.hour, current.minute)

        settings = self._settings_provider.trip_planner_settings()
        options: list[TripPlanFilter] = [
            TripMode(mode),
            TripDate(on_date),
            TripTime(at_time),
            MaxTransfers(settings.max_transfers),
            MinTransferWait(settings.min_waiting_time),
            MaxTransferWait(settings.max_waiting_time),
            WalkSpeed(settings.walking_speed),
            MaxWalkTime(settings.max_walking_time),
        ]

        request = TripPlanRequest(
            origin=to_partial(origin, target_is_transit_api),
            destination=to_partial(destination, target_is_transit_api),
            filters=FilterCollection.build(FilterFamily.TRIP_PLAN, options),
            usage=self._usage,
        )
        logger.debug(
            f"Built trip plan request {request.origin.path} -> {request.destination.path} "
            f"for {on_date.isoformat()} {at_time.strftime('%H:%M')} ({mode.value})"
        )
        return request
