"""Generator schemas for request/response validation."""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.domains.generator.models import DaysPerWeek, Equipment, Goal, Level, TimeAvailable


# Profile schemas

class WorkoutProfile(BaseModel):
    """Fitness profile submitted by the form."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=2)
    age: int = Field(ge=16, le=80)
    weight: float = Field(ge=40, le=200)  # kg
    height: float = Field(ge=140, le=220)  # cm
    goal: Goal
    level: Level
    time_available: TimeAvailable
    days_per_week: DaysPerWeek
    equipment: list[Equipment] = Field(min_length=1)
    limitations: str | None = None

    @field_validator("equipment")
    @classmethod
    def deduplicate_equipment(cls, v: list[Equipment]) -> list[Equipment]:
        """Collapse repeated selections, keeping the first-seen order."""
        return list(dict.fromkeys(v))


# Plan schemas

class Exercise(BaseModel):
    """Catalog exercise. All fields are display strings."""

    model_config = ConfigDict(frozen=True)

    name: str
    muscle: str
    sets: str
    reps: str
    rest: str
    tips: str


class WorkoutPlan(BaseModel):
    """Generated workout plan."""

    model_config = ConfigDict(frozen=True)

    title: str
    duration: str
    frequency: str
    exercises: tuple[Exercise, ...]
    tips: tuple[str, ...]


# Form option schemas

class Option(BaseModel):
    """Select option with its display label."""

    value: str
    label: str


class FormOptionsResponse(BaseModel):
    """Choices offered by the profile form."""

    goals: list[Option]
    levels: list[Option]
    time_available: list[Option]
    days_per_week: list[Option]
    equipment: list[Option]


class CatalogEntryResponse(BaseModel):
    """Exercises held for one goal/level pair."""

    goal: Goal
    level: Level
    exercises: list[Exercise]


# Validation error schemas

class FieldError(BaseModel):
    """Single field-level validation message."""

    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Body returned when the profile fails validation."""

    detail: list[FieldError]


# Messages keyed by field, then by pydantic error type ("*" is the field default)
PROFILE_ERROR_MESSAGES: dict[str, dict[str, str]] = {
    "name": {"*": "Nome deve ter pelo menos 2 caracteres"},
    "age": {
        "*": "Idade mínima 16 anos",
        "int_parsing": "Idade deve ser um número",
        "int_type": "Idade deve ser um número",
        "int_from_float": "Idade deve ser um número inteiro",
        "less_than_equal": "Idade máxima 80 anos",
    },
    "weight": {
        "*": "Peso mínimo 40kg",
        "float_parsing": "Peso deve ser um número",
        "float_type": "Peso deve ser um número",
        "less_than_equal": "Peso máximo 200kg",
    },
    "height": {
        "*": "Altura mínima 140cm",
        "float_parsing": "Altura deve ser um número",
        "float_type": "Altura deve ser um número",
        "less_than_equal": "Altura máxima 220cm",
    },
    "goal": {"*": "Selecione um objetivo"},
    "level": {"*": "Selecione seu nível"},
    "time_available": {"*": "Selecione o tempo disponível"},
    "days_per_week": {"*": "Selecione quantos dias por semana"},
    "equipment": {
        "*": "Selecione pelo menos um equipamento",
        "enum": "Equipamento inválido",
    },
}


def translate_validation_errors(errors: list[dict[str, Any]]) -> list[FieldError]:
    """Turn pydantic error dicts into one Portuguese message per field.

    The first error reported for a field wins, like the form shows a single
    message under each input.
    """
    translated: dict[str, FieldError] = {}
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in ("body", "path", "query"):
            loc = loc[1:]
        field = str(loc[0]) if loc else "body"
        if field in translated:
            continue

        messages = PROFILE_ERROR_MESSAGES.get(field)
        if messages is None:
            message = error.get("msg", "Valor inválido")
        else:
            message = messages.get(error.get("type", ""), messages["*"])

        translated[field] = FieldError(field=field, message=message)

    return list(translated.values())
