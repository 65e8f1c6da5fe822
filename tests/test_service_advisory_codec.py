"""Tests for the service advisory codec."""

from datetime import datetime
from typing import Any

import pytest

from transit_trail.adapters.transit_api.service_advisory_codec import (
    decode_service_advisories,
    decode_service_advisory,
    decode_service_advisory_response,
    encode_service_advisory,
)
from transit_trail.domain.errors import MalformedPayload
from transit_trail.domain.models import Category, Priority, ServiceAdvisory


@pytest.fixture
def advisory_payload() -> dict[str, Any]:
    return {
        "key": 96,
        "priority": 2,
        "title": "Route 16 detour",
        "body": "Buses are detoured off Osborne Street between Glasgow and River.",
        "category": "Transit",
        "updated-at": "2023-04-27T15:20:39",
    }


class TestDecodeServiceAdvisory:
    """Tests for advisory decoding."""

    def test_decodes_api_advisory(self, advisory_payload: dict[str, Any]) -> None:
        """Given an advisory from the API, when decoding, then every field is read."""
        advisory = decode_service_advisory(advisory_payload)

        assert advisory == ServiceAdvisory(
            key=96,
            priority=Priority.HIGH,
            title="Route 16 detour",
            body="Buses are detoured off Osborne Street between Glasgow and River.",
            category=Category.TRANSIT,
            updated_at=datetime(2023, 4, 27, 15, 20, 39),
        )

    @pytest.mark.parametrize(
        ("wire", "expected"),
        [("Handi-Transit", Category.HANDI_TRANSIT), ("all", Category.ALL), ("ALL", Category.ALL)],
    )
    def test_category_ignores_case(
        self, advisory_payload: dict[str, Any], wire: str, expected: Category
    ) -> None:
        """Given a category in any case, when decoding, then the matching category is returned."""
        advisory = decode_service_advisory({**advisory_payload, "category": wire})

        assert advisory.category is expected

    @pytest.mark.parametrize("priority", [0, 6, "urgent"])
    def test_bad_priority_raises(self, advisory_payload: dict[str, Any], priority: Any) -> None:
        """Given a priority outside 1-5, when decoding, then MalformedPayload names the field."""
        with pytest.raises(MalformedPayload) as exc_info:
            decode_service_advisory({**advisory_payload, "priority": priority})

        assert exc_info.value.path == "priority"

    def test_missing_updated_at_raises(self, advisory_payload: dict[str, Any]) -> None:
        """Given no updated-at, when decoding, then MalformedPayload names the field."""
        del advisory_payload["updated-at"]

        with pytest.raises(MalformedPayload) as exc_info:
            decode_service_advisory(advisory_payload)

        assert exc_info.value.path == "updated-at"


class TestServiceAdvisoryResponses:
    """Tests for the advisory response envelopes."""

    def test_list_response_reports_index(self, advisory_payload: dict[str, Any]) -> None:
        """Given one bad advisory in a list, when decoding, then the path names its index."""
        body = {"service-advisories": [advisory_payload, {**advisory_payload, "category": "Trains"}]}

        with pytest.raises(MalformedPayload) as exc_info:
            decode_service_advisories(body)

        assert exc_info.value.path == "service-advisories[1].category"

    def test_single_response(self, advisory_payload: dict[str, Any]) -> None:
        """Given a single advisory response, when decoding, then the advisory is unwrapped."""
        advisory = decode_service_advisory_response({"service-advisory": advisory_payload})

        assert advisory.key == 96

    def test_round_trip(self, advisory_payload: dict[str, Any]) -> None:
        """Given a decoded advisory, when encoding, then the wire form is reproduced."""
        advisory = decode_service_advisory(advisory_payload)

        assert encode_service_advisory(advisory) == advisory_payload
