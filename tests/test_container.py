"""Tests for container wiring."""

from health_dashboard.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.dashboard_service.timezone_name == "UTC"
    assert container.dashboard_service.today_index == settings.days_before
    assert container.sessions.service is container.dashboard_service
    assert container.sessions.ttl_seconds == settings.session_ttl_seconds
