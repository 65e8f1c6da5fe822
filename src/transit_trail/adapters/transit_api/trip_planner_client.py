"""Trip planner adapter for the Winnipeg Transit API.

API Documentation: https://api.winnipegtransit.com/home/api/v3/services/trip-planner
"""

import logging
from typing import Any

from transit_trail.adapters.payload_logger import log_api_request
from transit_trail.adapters.transit_api.filter_encoder import FilterEncoder
from transit_trail.adapters.transit_api.location_codec import LocationCodec
from transit_trail.adapters.transit_api.trip_codec import TripCodec
from transit_trail.domain.models.decode_result import PlanDecodeResult
from transit_trail.domain.models.trip_plan_request import TripPlanRequest, Usage
from transit_trail.domain.ports.transit_transport import TransitTransport

logger = logging.getLogger(__name__)

TRIP_PLANNER_RESOURCE = "trip-planner.json"


class TransitApiTripPlanner:
    """Adapter that sends trip plan requests through a transport and decodes the plans."""

    def __init__(self, transport: TransitTransport, api_key: str) -> None:
        """Initialize with the transport used for HTTP and the API key.

        Args:
            transport: Sends the query and returns the decoded JSON body.
            api_key: Winnipeg Transit API key, sent as the ``api-key`` parameter.
        """
        self._transport = transport
        self._api_key = api_key

    def query_params(self, request: TripPlanRequest) -> list[tuple[str, str]]:
        """Query parameters for a request, in send order."""
        params = [("api-key", self._api_key)]
        if request.usage is not Usage.NORMAL:
            params.append(("usage", request.usage.value))
        params.append(("origin", request.origin.path))
        params.append(("destination", request.destination.path))
        params.extend(FilterEncoder.to_query_params(request.filters))
        return params

    @staticmethod
    def request_body(request: TripPlanRequest) -> dict[str, Any]:
        """JSON form of a request, as logged and as used by JSON-speaking planners."""
        return {
            "origin": LocationCodec.encode_partial(request.origin),
            "destination": LocationCodec.encode_partial(request.destination),
            "filters": FilterEncoder.encode(request.filters),
        }

    async def plan_trip(self, request: TripPlanRequest) -> list[PlanDecodeResult]:
        """Request plans and decode them.

        Returns:
            One result per plan. Segments that failed to decode are listed in
            each result's ``failures`` instead of failing the whole call.

        Raises:
            DecodeError: The response envelope or a plan's own fields are malformed.
        """
        params = self.query_params(request)
        log_api_request(TRIP_PLANNER_RESOURCE, params, self.request_body(request))

        body = await self._transport.get_json(TRIP_PLANNER_RESOURCE, params)
        results = TripCodec.decode_plans(body)

        incomplete = sum(1 for result in results if not result.is_complete)
        if incomplete:
            logger.warning(f"{incomplete} of {len(results)} plans are missing segments")
        logger.debug(f"Decoded {len(results)} plans for {request.origin.path}")
        return results
