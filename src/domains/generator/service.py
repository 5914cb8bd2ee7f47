"""Plan selection: maps a fitness profile to a workout plan.

Everything here is a pure function of the profile and the static catalog.
Unknown goals, levels or session lengths fall back to defaults instead of
raising, since the plan is the last step before rendering.
"""
from typing import Any

from src.domains.generator.catalog import get_exercises
from src.domains.generator.models import Goal, TimeAvailable, raw_value
from src.domains.generator.schemas import WorkoutPlan, WorkoutProfile

TITLE_PREFIX = "Treino Personalizado"
MAX_TIPS = 4

# Exercises per session length; any other value gets DEFAULT_EXERCISE_COUNT
EXERCISE_COUNTS = {
    TimeAvailable.MIN_30.value: 4,
    TimeAvailable.MIN_45.value: 5,
}
DEFAULT_EXERCISE_COUNT = 6

GOAL_TITLES = {
    Goal.WEIGHT_LOSS.value: "Emagrecimento",
    Goal.MUSCLE_GAIN.value: "Ganho de Massa",
}
DEFAULT_GOAL_TITLE = "Fortalecimento"

GOAL_TIPS = {
    Goal.WEIGHT_LOSS.value: "Para perda de peso, combine com déficit calórico moderado",
    Goal.MUSCLE_GAIN.value: "Para ganho de massa, mantenha superávit calórico e proteína adequada",
}


def _lookup(table: dict, value: Any, default: Any) -> Any:
    try:
        return table.get(raw_value(value), default)
    except TypeError:
        # Unhashable input
        return default


def exercise_count_for(time_available: Any) -> int:
    """Number of exercises that fit in a session: 30 -> 4, 45 -> 5, else 6."""
    return _lookup(EXERCISE_COUNTS, time_available, DEFAULT_EXERCISE_COUNT)


def plan_title(goal: Any) -> str:
    return f"{TITLE_PREFIX} - {_lookup(GOAL_TITLES, goal, DEFAULT_GOAL_TITLE)}"


def build_tips(profile: WorkoutProfile) -> list[str]:
    """Personalized tips, capped at MAX_TIPS in construction order.

    The goal-specific tip is appended after the base tips, so the cap
    always drops it.
    """
    tips = [
        f"Baseado na sua idade ({raw_value(profile.age)} anos), mantenha boa hidratação durante o treino",
        f"Com {raw_value(profile.days_per_week)} por semana, você terá ótimos resultados em 4-6 semanas",
        "Aumente a intensidade gradualmente a cada semana",
        "Descanse pelo menos 1 dia entre treinos intensos",
        "Mantenha uma alimentação balanceada para potencializar os resultados",
    ]

    goal_tip = _lookup(GOAL_TIPS, profile.goal, None)
    if goal_tip:
        tips.append(goal_tip)

    return tips[:MAX_TIPS]


def generate_plan(profile: WorkoutProfile) -> WorkoutPlan:
    """Select a workout plan for the profile."""
    exercises = get_exercises(profile.goal, profile.level)
    exercise_count = exercise_count_for(profile.time_available)

    return WorkoutPlan(
        title=plan_title(profile.goal),
        duration=f"{raw_value(profile.time_available)} minutos",
        frequency=f"{raw_value(profile.days_per_week)} por semana",
        exercises=exercises[:exercise_count],
        tips=tuple(build_tips(profile)),
    )
