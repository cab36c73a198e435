"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from health_dashboard.adapters.supabase_record_repository import (
    SupabaseRecordRepository,
)
from health_dashboard.config import Settings
from health_dashboard.services.dashboard import DashboardService
from health_dashboard.services.fetcher import DayRecordFetcher
from health_dashboard.services.sessions import DashboardSessionRegistry


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    dashboard_service: DashboardService
    sessions: DashboardSessionRegistry


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_key
    )
    repository = SupabaseRecordRepository(supabase_client)
    dashboard_service = DashboardService(
        fetcher=DayRecordFetcher(repository),
        timezone_name=resolved_settings.timezone,
        days_before=resolved_settings.days_before,
        days_after=resolved_settings.days_after,
    )
    sessions = DashboardSessionRegistry(
        service=dashboard_service,
        ttl_seconds=resolved_settings.session_ttl_seconds,
    )
    return AppContainer(
        settings=resolved_settings,
        dashboard_service=dashboard_service,
        sessions=sessions,
    )
