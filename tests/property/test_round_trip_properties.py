"""Property tests for request encoding and response decoding round trips."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pyslide import SlideService
from pyslide.core.request_builder import RequestBuilder
from pyslide.models import Address, Agent, Client, ClientPayload
from pyslide.transport.queue import ExpectedRequest, QueuedTransport, ScriptedResponse


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

ids = st.from_regex(r"[a-z]{1,2}_[0-9a-f]{12}", fullmatch=True)
names = st.text(min_size=1, max_size=40)
timestamps = st.datetimes(
    min_value=datetime(2000, 1, 1),
    max_value=datetime(2100, 1, 1),
    timezones=st.just(timezone.utc),
).map(lambda d: d.replace(microsecond=0))
addresses = st.builds(
    Address,
    mac=st.from_regex(r"([0-9a-f]{2}:){5}[0-9a-f]{2}", fullmatch=True),
    ips=st.lists(st.ip_addresses(v=4).map(str), max_size=3),
)
agents = st.builds(
    Agent,
    agent_id=ids,
    device_id=ids,
    display_name=names,
    hostname=names,
    os=st.sampled_from(["windows", "linux"]),
    booted_at=st.none() | timestamps,
    last_seen_at=st.none() | timestamps,
    addresses=st.lists(addresses, max_size=3),
)


@settings(max_examples=100)
@given(agent=agents)
@pytest.mark.asyncio
async def test_agent_round_trips_through_update(agent: Agent) -> None:
    transport = QueuedTransport(
        [
            (
                ExpectedRequest(
                    "PATCH",
                    f"/v1/agent/{agent.agent_id}",
                    body={"display_name": agent.display_name},
                ),
                ScriptedResponse.from_json(200, agent.model_dump(mode="json")),
            )
        ]
    )
    service = SlideService("fakeToken", transport=transport)

    actual = await service.agents.update(agent.agent_id, agent.display_name)

    assert actual == agent
    transport.assert_exhausted()


@settings(max_examples=100)
@given(client_id=ids, name=names, comments=st.none() | st.text(max_size=40))
@pytest.mark.asyncio
async def test_client_payload_round_trips_through_create(
    client_id: str, name: str, comments: str | None
) -> None:
    payload = ClientPayload(name=name, comments=comments)
    echoed_request = payload.model_dump(mode="json", exclude_none=True)
    echoed = {"client_id": client_id, **echoed_request}
    transport = QueuedTransport(
        [
            (
                ExpectedRequest("POST", "/v1/client", body=echoed_request),
                ScriptedResponse.from_json(201, echoed),
            )
        ]
    )
    service = SlideService("fakeToken", transport=transport)

    actual = await service.clients.create(payload)

    assert actual == Client(client_id=client_id, name=name, comments=comments or "")


@settings(max_examples=100)
@given(method=st.sampled_from(["GET", "POST", "PATCH", "DELETE"]), resource_id=st.none() | ids)
def test_missing_query_is_always_empty_tuple(method: str, resource_id: str | None) -> None:
    request = RequestBuilder("https://api.slide.tech", "t", "ua").build(
        method, "/v1/agent", resource_id=resource_id
    )
    assert request.query == ()
