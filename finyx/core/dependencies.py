"""Dependency injection for FastAPI."""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request

from finyx.core.config import Settings, settings
from finyx.domain.entities import Account, Company, Goal
from finyx.domain.interfaces import ACCOUNTS, COMPANIES, GOALS, RemoteStore
from finyx.infrastructure import build_store
from finyx.application.services import (
    DashboardService,
    DashboardSession,
    SectionService,
    TransactionService,
)


@dataclass
class AppContext:
    """Objects that live as long as the application: the store handle
    and the dashboard session built on top of it."""

    store: RemoteStore
    session: DashboardSession


def build_context(app_settings: Settings) -> AppContext:
    """Construct the store and the dashboard session from settings."""
    store = build_store(app_settings)
    session = DashboardSession(TransactionService(store))
    return AppContext(store=store, session=session)


def get_context(request: Request) -> AppContext:
    """Get the context created at application startup."""
    return request.app.state.context


def get_app_settings() -> Settings:
    """Get the application settings."""
    return settings


# Store and session dependencies
def get_remote_store(
    context: Annotated[AppContext, Depends(get_context)],
) -> RemoteStore:
    """Get the RemoteStore instance."""
    return context.store


def get_dashboard_session(
    context: Annotated[AppContext, Depends(get_context)],
) -> DashboardSession:
    """Get the DashboardSession instance."""
    return context.session


# Service dependencies
def get_dashboard_service(
    session: Annotated[DashboardSession, Depends(get_dashboard_session)],
) -> DashboardService:
    """Get a DashboardService instance."""
    return DashboardService(session=session)


def get_account_service(
    store: Annotated[RemoteStore, Depends(get_remote_store)],
) -> SectionService[Account]:
    return SectionService(store, ACCOUNTS, Account.from_record)


def get_goal_service(
    store: Annotated[RemoteStore, Depends(get_remote_store)],
) -> SectionService[Goal]:
    return SectionService(store, GOALS, Goal.from_record)


def get_company_service(
    store: Annotated[RemoteStore, Depends(get_remote_store)],
) -> SectionService[Company]:
    return SectionService(store, COMPANIES, Company.from_record)
