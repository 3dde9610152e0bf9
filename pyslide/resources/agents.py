"""Agents: backup agents installed on protected machines."""

from __future__ import annotations

import asyncio

from pyslide.core.paginator import PageConsumer
from pyslide.models.requests import (
    AgentAutoPairPayload,
    AgentPairPayload,
    AgentUpdatePayload,
    ListOptions,
)
from pyslide.models.schemas import Agent, AgentAutoPairResponse
from pyslide.resources.base import ResourceClient


class AgentsClient(ResourceClient):
    path = "/v1/agent"

    async def list(
        self,
        consumer: PageConsumer[Agent],
        options: ListOptions | None = None,
        cancel: asyncio.Event | None = None,
    ) -> None:
        await self._list(self.path, Agent, consumer, options, cancel)

    async def get(self, agent_id: str) -> Agent:
        return await self._get(agent_id, Agent)

    async def update(self, agent_id: str, display_name: str) -> Agent:
        """Rename an agent and return its updated record."""
        return await self._session.call(
            "PATCH",
            self.path,
            resource_id=agent_id,
            body=AgentUpdatePayload(display_name=display_name),
            expected_status=200,
            model=Agent,
        )

    async def auto_pair(self, payload: AgentAutoPairPayload) -> AgentAutoPairResponse:
        """Register an agent and get the pair code to install it with."""
        return await self._session.call(
            "POST", self.path, body=payload, expected_status=201, model=AgentAutoPairResponse
        )

    async def pair(self, payload: AgentPairPayload) -> Agent:
        """Pair an installed agent with a device using its pair code."""
        return await self._session.call(
            "POST", self.path, body=payload, expected_status=200, model=Agent
        )
