"""Enumerations for the workout generator form."""
import enum
from typing import Any


class Goal(str, enum.Enum):
    """Primary training objective."""

    STRENGTH = "strength"
    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"


class Level(str, enum.Enum):
    """Self-reported training experience."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class TimeAvailable(str, enum.Enum):
    """Minutes available per session."""

    MIN_30 = "30"
    MIN_45 = "45"
    MIN_60 = "60"


class DaysPerWeek(str, enum.Enum):
    """Weekly training frequency label."""

    THREE = "3 dias"
    FOUR = "4 dias"
    FIVE = "5 dias"


class Equipment(str, enum.Enum):
    """Equipment the user has at hand."""

    BODYWEIGHT = "Peso corporal"
    DUMBBELLS = "Halteres"
    RESISTANCE_BANDS = "Elásticos"
    PULL_UP_BAR = "Barra fixa"
    KETTLEBELL = "Kettlebell"
    BARBELL = "Barra e anilhas"


def raw_value(value: Any) -> Any:
    """Unwrap enum members to their plain value, leave anything else as is."""
    if isinstance(value, enum.Enum):
        return value.value
    return value


# Labels shown on the form selects
GOAL_LABELS = {
    Goal.WEIGHT_LOSS: "Perder Peso",
    Goal.MUSCLE_GAIN: "Ganhar Massa Muscular",
    Goal.STRENGTH: "Ganhar Força",
}

LEVEL_LABELS = {
    Level.BEGINNER: "Iniciante (0-6 meses)",
    Level.INTERMEDIATE: "Intermediário (6 meses - 2 anos)",
    Level.ADVANCED: "Avançado (2+ anos)",
}

TIME_LABELS = {
    TimeAvailable.MIN_30: "30 minutos",
    TimeAvailable.MIN_45: "45 minutos",
    TimeAvailable.MIN_60: "60 minutos",
}

DAYS_LABELS = {
    DaysPerWeek.THREE: "3 dias por semana",
    DaysPerWeek.FOUR: "4 dias por semana",
    DaysPerWeek.FIVE: "5 dias por semana",
}
