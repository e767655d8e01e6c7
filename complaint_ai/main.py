"""Composition root — builds the prioritization services once per process."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy import text

from complaint_ai.adapters.llm.openai_adapter import create_completion_client
from complaint_ai.adapters.persistence.database import create_engine, create_session_factory
from complaint_ai.adapters.persistence.repositories import SqlSettingsStore
from complaint_ai.application.ports.complaint_repo import ComplaintRepository
from complaint_ai.application.ports.completion_port import CompletionClientPort
from complaint_ai.application.ports.settings_store import SettingsStore
from complaint_ai.application.use_cases.background_prioritization import BackgroundPrioritizer
from complaint_ai.application.use_cases.prioritize_complaint import PrioritizeComplaintUseCase
from complaint_ai.application.use_cases.reprioritize_complaint import (
    ReprioritizeComplaintUseCase,
)
from complaint_ai.application.use_cases.settings_gate import SettingsGate
from complaint_ai.config import Settings, settings

logger = logging.getLogger(__name__)


@dataclass
class Container:
    settings_gate: SettingsGate
    prioritize: PrioritizeComplaintUseCase
    background: BackgroundPrioritizer | None = None
    reprioritize: ReprioritizeComplaintUseCase | None = None


def build_container(
    settings_gate: SettingsGate,
    client: CompletionClientPort | None,
    config: Settings = settings,
    complaint_repo: ComplaintRepository | None = None,
) -> Container:
    """Wire use cases from already-constructed collaborators."""
    prioritize = PrioritizeComplaintUseCase(
        settings_gate=settings_gate,
        client=client,
        max_tokens=config.ai_max_tokens,
        temperature=config.ai_temperature,
        timeout_seconds=config.ai_request_timeout_seconds,
    )
    container = Container(settings_gate=settings_gate, prioritize=prioritize)
    if complaint_repo is not None:
        container.background = BackgroundPrioritizer(
            prioritize, complaint_repo, delay_seconds=config.background_delay_seconds
        )
        container.reprioritize = ReprioritizeComplaintUseCase(prioritize, complaint_repo)
    return container


@asynccontextmanager
async def lifespan(
    complaint_repo: ComplaintRepository | None = None,
    config: Settings = settings,
    seed_settings: bool = True,
    settings_store: SettingsStore | None = None,
) -> AsyncIterator[Container]:
    """Startup and shutdown of the prioritization services.

    The settings store defaults to the SQL store on ``config.database_url``;
    pass *settings_store* to use another one (no engine is created then).
    """
    engine = None
    if settings_store is None:
        engine = create_engine(config)
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("Database connection established")
        except Exception as e:
            logger.warning("Database not available on startup: %s", e)
        settings_store = SqlSettingsStore(create_session_factory(engine))

    gate = SettingsGate(settings_store)
    if seed_settings:
        try:
            await gate.seed_defaults()
        except Exception as e:
            logger.warning("Could not initialize default settings: %s", e)

    container = build_container(
        gate, create_completion_client(config), config=config, complaint_repo=complaint_repo
    )
    try:
        yield container
    finally:
        if container.background is not None:
            await container.background.drain()
        if engine is not None:
            await engine.dispose()
