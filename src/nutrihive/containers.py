"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutrihive.adapters.supabase_food_entry_repository import (
    SupabaseFoodEntryRepository,
)
from nutrihive.adapters.supabase_goals_repository import SupabaseGoalsRepository
from nutrihive.config import Settings
from nutrihive.services.adjustments import MealAdjustmentEngine
from nutrihive.services.dashboard import DashboardService
from nutrihive.services.entries import FoodEntryService
from nutrihive.services.estimator import NutritionEstimator
from nutrihive.services.goals import GoalsService
from nutrihive.services.insights import InsightsService
from nutrihive.services.progress import ProgressAggregator
from nutrihive.services.trends import TrendPredictionEngine


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    estimator: NutritionEstimator
    aggregator: ProgressAggregator
    entry_service: FoodEntryService
    goals_service: GoalsService
    dashboard_service: DashboardService
    insights_service: InsightsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    return assemble_container(
        resolved_settings,
        entry_service=FoodEntryService(SupabaseFoodEntryRepository(supabase_client)),
        goals_service=GoalsService(SupabaseGoalsRepository(supabase_client)),
    )


def assemble_container(
    settings: Settings,
    entry_service: FoodEntryService,
    goals_service: GoalsService,
) -> AppContainer:
    """Wire analytics services around the given storage-backed services."""
    tz = settings.tz
    aggregator = ProgressAggregator(tz=tz)
    dashboard_service = DashboardService(
        entry_service=entry_service,
        goals_service=goals_service,
        aggregator=aggregator,
    )
    insights_service = InsightsService(
        entry_service=entry_service,
        goals_service=goals_service,
        default_weight_kg=settings.default_weight_kg,
        trend_engine=TrendPredictionEngine(aggregator=aggregator),
        adjustment_engine=MealAdjustmentEngine(tz=tz),
    )
    return AppContainer(
        settings=settings,
        estimator=entry_service.estimator,
        aggregator=aggregator,
        entry_service=entry_service,
        goals_service=goals_service,
        dashboard_service=dashboard_service,
        insights_service=insights_service,
    )
