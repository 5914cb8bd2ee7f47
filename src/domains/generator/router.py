"""Workout generator endpoints."""
import structlog
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from src.domains.generator.catalog import get_exercises, has_entry, iter_catalog
from src.domains.generator.models import (
    DAYS_LABELS,
    GOAL_LABELS,
    LEVEL_LABELS,
    TIME_LABELS,
    Equipment,
    Goal,
    Level,
    raw_value,
)
from src.domains.generator.printing import render_plan_text
from src.domains.generator.schemas import (
    CatalogEntryResponse,
    FormOptionsResponse,
    Option,
    ValidationErrorResponse,
    WorkoutPlan,
    WorkoutProfile,
)
from src.domains.generator.service import generate_plan

logger = structlog.get_logger(__name__)

router = APIRouter()

_VALIDATION_RESPONSES = {422: {"model": ValidationErrorResponse}}


def _generate(profile: WorkoutProfile) -> WorkoutPlan:
    if not has_entry(profile.goal, profile.level):
        logger.warning(
            "catalog_fallback",
            goal=str(raw_value(profile.goal)),
            level=str(raw_value(profile.level)),
        )

    plan = generate_plan(profile)
    logger.info(
        "plan_generated",
        goal=str(raw_value(profile.goal)),
        level=str(raw_value(profile.level)),
        time_available=str(raw_value(profile.time_available)),
        exercise_count=len(plan.exercises),
    )
    return plan


# ==================== Form ====================

@router.get("/options", response_model=FormOptionsResponse)
async def get_form_options() -> FormOptionsResponse:
    """List the choices offered by the profile form."""
    return FormOptionsResponse(
        goals=[Option(value=k.value, label=v) for k, v in GOAL_LABELS.items()],
        levels=[Option(value=k.value, label=v) for k, v in LEVEL_LABELS.items()],
        time_available=[Option(value=k.value, label=v) for k, v in TIME_LABELS.items()],
        days_per_week=[Option(value=k.value, label=v) for k, v in DAYS_LABELS.items()],
        equipment=[Option(value=e.value, label=e.value) for e in Equipment],
    )


# ==================== Catalog ====================

@router.get("/catalog", response_model=list[CatalogEntryResponse])
async def list_catalog() -> list[CatalogEntryResponse]:
    """List every goal/level entry of the exercise catalog."""
    return [
        CatalogEntryResponse(goal=goal, level=level, exercises=list(exercises))
        for goal, level, exercises in iter_catalog()
    ]


@router.get("/catalog/{goal}/{level}", response_model=CatalogEntryResponse)
async def get_catalog_entry(goal: Goal, level: Level) -> CatalogEntryResponse:
    """Get the exercises for one goal/level pair."""
    return CatalogEntryResponse(goal=goal, level=level, exercises=list(get_exercises(goal, level)))


# ==================== Plans ====================

@router.post("/plans", response_model=WorkoutPlan, responses=_VALIDATION_RESPONSES)
async def create_plan(profile: WorkoutProfile) -> WorkoutPlan:
    """Generate a workout plan for the submitted profile."""
    return _generate(profile)


@router.post("/plans/print", response_class=PlainTextResponse, responses=_VALIDATION_RESPONSES)
async def print_plan(profile: WorkoutProfile) -> PlainTextResponse:
    """Generate a workout plan and render it as a printable sheet."""
    plan = _generate(profile)
    return PlainTextResponse(render_plan_text(plan, name=profile.name))
