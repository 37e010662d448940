"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from nutrihive.api.models import EstimateRequest, FoodEntryCreate, GoalsUpdate
from nutrihive.app_logging import configure_logging
from nutrihive.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Nutrihive")
    app.state.container = container

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        logger.warning("Rejected request %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/estimate")
    async def estimate(payload: EstimateRequest, request: Request) -> dict[str, object]:
        """Estimate nutrition for a food name and quantity."""
        state_container: AppContainer = request.app.state.container
        estimator = state_container.estimator
        return {
            "food_name": payload.food_name,
            "known": estimator.is_known(payload.food_name),
            "nutrition": estimator.estimate(payload.food_name, payload.quantity),
        }

    @app.get("/swaps")
    async def smart_swaps(item: str, request: Request) -> dict[str, object]:
        """Return healthier alternatives for a food item, if any."""
        state_container: AppContainer = request.app.state.container
        engine = state_container.insights_service.adjustment_engine
        return {"swap": engine.generate_smart_swaps(item)}

    @app.post("/users/{user_id}/entries", status_code=status.HTTP_201_CREATED)
    async def create_entry(
        user_id: str, payload: FoodEntryCreate, request: Request
    ) -> dict[str, object]:
        """Log a food entry with estimated nutrition."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.entry_service.log_food(
            user_id=user_id,
            food_name=payload.food_name,
            quantity=payload.quantity,
            meal_type=payload.meal_type,
            fiber=payload.fiber,
            timestamp=payload.timestamp,
        )
        return {"entry": entry}

    @app.get("/users/{user_id}/entries")
    async def list_entries(user_id: str, request: Request) -> dict[str, object]:
        """Return all entries for a user."""
        state_container: AppContainer = request.app.state.container
        return {"entries": state_container.entry_service.list_entries(user_id)}

    @app.get("/users/{user_id}/goals")
    async def get_goals(user_id: str, request: Request) -> dict[str, object]:
        """Return the user's goals, defaults when none are stored."""
        state_container: AppContainer = request.app.state.container
        return {"goals": state_container.goals_service.get_goals(user_id)}

    @app.put("/users/{user_id}/goals")
    async def put_goals(
        user_id: str, payload: GoalsUpdate, request: Request
    ) -> dict[str, object]:
        """Replace the user's goals."""
        state_container: AppContainer = request.app.state.container
        goals = payload.to_goals()
        state_container.goals_service.set_goals(user_id, goals)
        return {"goals": goals}

    @app.get("/users/{user_id}/dashboard")
    async def dashboard(user_id: str, request: Request) -> dict[str, object]:
        """Return today's totals, goal progress and recommendations."""
        state_container: AppContainer = request.app.state.container
        return {"dashboard": state_container.dashboard_service.get_today(user_id)}

    @app.get("/users/{user_id}/progress")
    async def progress(
        user_id: str, request: Request, days: int = 7
    ) -> dict[str, object]:
        """Return per-day totals and averages for recent days."""
        if days < 1:
            raise ValueError(f"Days must be positive, got {days}")
        state_container: AppContainer = request.app.state.container
        entries = state_container.entry_service.list_entries(user_id)
        return {"summary": state_container.aggregator.summarize(entries, days=days)}

    @app.get("/users/{user_id}/insights")
    async def insights(
        user_id: str, request: Request, time_range: str = Query("7d", alias="range")
    ) -> dict[str, object]:
        """Return imbalance, pattern and trend analytics."""
        state_container: AppContainer = request.app.state.container
        report = state_container.insights_service.get_insights(user_id, time_range)
        return {"insights": report}

    @app.post("/users/{user_id}/entries/{entry_id}/adjustments")
    async def adjustments(
        user_id: str,
        entry_id: str,
        request: Request,
        time_range: str = Query("7d", alias="range"),
    ) -> dict[str, object]:
        """Return adjustment suggestions for one logged meal."""
        state_container: AppContainer = request.app.state.container
        result = state_container.insights_service.adjust_meal(
            user_id, entry_id, time_range
        )
        if result is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return {"adjustments": result}

    return app
