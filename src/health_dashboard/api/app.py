"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Query, Request, status

from health_dashboard.api.dashboard_models import (
    DatesResponse,
    DayCellResponse,
    DaySummaryResponse,
)
from health_dashboard.app_logging import configure_logging
from health_dashboard.containers import AppContainer

USER_NOT_FOUND_MESSAGE = "No user found for this number."
INVALID_NUMBER_MESSAGE = "Please enter a valid number."
SUPERSEDED_MESSAGE = "Dashboard request superseded by a newer selection."


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Health Dashboard")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/dates")
    async def dates(
        request: Request, selected: int | None = Query(default=None, ge=0)
    ) -> DatesResponse:
        """Return the selectable day window."""
        state_container: AppContainer = request.app.state.container
        service = state_container.dashboard_service
        window = service.build_window()
        selected_index = service.today_index if selected is None else selected
        if selected_index >= len(window):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Selected day is outside the day window.",
            )
        return DatesResponse(
            selected=selected_index,
            dates=[
                DayCellResponse.from_cell(index, cell, index == selected_index)
                for index, cell in enumerate(window)
            ],
        )

    @app.get("/dashboard")
    async def dashboard(
        request: Request,
        phone: str = Query(default=""),
        day: int | None = Query(default=None, ge=0),
    ) -> DaySummaryResponse:
        """Return the aggregated dashboard for a phone number and day."""
        state_container: AppContainer = request.app.state.container
        sender = phone.strip()
        if not sender:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=INVALID_NUMBER_MESSAGE,
            )
        service = state_container.dashboard_service
        day_index = service.today_index if day is None else day
        state = state_container.sessions.get(sender)
        try:
            snapshot = await state.recompute(sender, day_index)
        except IndexError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Selected day is outside the day window.",
            ) from exc

        if snapshot is None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=SUPERSEDED_MESSAGE
            )
        if snapshot.summary is None:
            logger.info("Dashboard requested for unknown user")
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=USER_NOT_FOUND_MESSAGE
            )
        return DaySummaryResponse.from_summary(
            sender, day_index, state.window[day_index], snapshot.summary
        )

    return app
