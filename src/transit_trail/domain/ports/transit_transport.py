"""Transit API transport port."""

from typing import Any, Protocol


class TransitTransport(Protocol):
    """Port for the HTTP collaborator that talks to the transit API.

    Implementations send the encoded query and hand back the decoded JSON
    body; turning that body into domain values is the codecs' job.
    """

    async def get_json(self, resource: str, params: list[tuple[str, str]]) -> dict[str, Any]:
        """Fetch ``resource`` (e.g. ``trip-planner.json``) with the given query parameters."""
        ...
