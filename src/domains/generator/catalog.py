"""
Static exercise catalog for the workout generator.

Exercises are grouped by goal and level and listed in execution order,
compound movements first. Plans keep a prefix of each list, so the order
decides what survives when a short session truncates it.
"""

import enum
from collections.abc import Iterator
from types import MappingProxyType
from typing import Any, Mapping, TypeVar

from src.domains.generator.models import Goal, Level
from src.domains.generator.schemas import Exercise


EXERCISES: dict[Goal, dict[Level, list[dict[str, str]]]] = {
    # FORTALECIMENTO (Strength)
    Goal.STRENGTH: {
        Level.BEGINNER: [
            {"name": "Agachamento", "sets": "3", "reps": "12-15", "rest": "60s", "muscle": "Pernas", "tips": "Mantenha o peito erguido e joelhos alinhados"},
            {"name": "Flexão (joelhos)", "sets": "3", "reps": "8-12", "rest": "60s", "muscle": "Peito/Tríceps", "tips": "Comece com joelhos apoiados se necessário"},
            {"name": "Prancha", "sets": "3", "reps": "20-30s", "rest": "45s", "muscle": "Core", "tips": "Mantenha o corpo reto como uma tábua"},
            {"name": "Remada com elástico", "sets": "3", "reps": "12-15", "rest": "60s", "muscle": "Costas", "tips": "Puxe os ombros para trás"},
        ],
        Level.INTERMEDIATE: [
            {"name": "Agachamento com peso", "sets": "4", "reps": "10-12", "rest": "90s", "muscle": "Pernas", "tips": "Use halteres ou barra para resistência"},
            {"name": "Flexão tradicional", "sets": "3", "reps": "12-15", "rest": "60s", "muscle": "Peito/Tríceps", "tips": "Desça até o peito quase tocar o chão"},
            {"name": "Prancha lateral", "sets": "3", "reps": "30-45s", "rest": "60s", "muscle": "Core", "tips": "Alterne os lados a cada série"},
            {"name": "Desenvolvimento com halteres", "sets": "3", "reps": "10-12", "rest": "90s", "muscle": "Ombros", "tips": "Controle o movimento na descida"},
            {"name": "Afundo", "sets": "3", "reps": "10 cada perna", "rest": "75s", "muscle": "Pernas", "tips": "Mantenha o tronco ereto"},
        ],
        Level.ADVANCED: [
            {"name": "Agachamento búlgaro", "sets": "4", "reps": "8-10 cada perna", "rest": "90s", "muscle": "Pernas", "tips": "Foque na perna da frente"},
            {"name": "Flexão diamante", "sets": "4", "reps": "8-12", "rest": "75s", "muscle": "Tríceps", "tips": "Mãos formam um diamante"},
            {"name": "Prancha com elevação", "sets": "3", "reps": "45-60s", "rest": "60s", "muscle": "Core", "tips": "Eleve alternadamente braços e pernas"},
            {"name": "Burpee", "sets": "4", "reps": "8-10", "rest": "90s", "muscle": "Corpo todo", "tips": "Movimento explosivo"},
            {"name": "Pistol squat assistido", "sets": "3", "reps": "5-8 cada perna", "rest": "120s", "muscle": "Pernas", "tips": "Use apoio se necessário"},
        ],
    },
    # EMAGRECIMENTO (Weight loss)
    Goal.WEIGHT_LOSS: {
        Level.BEGINNER: [
            {"name": "Caminhada no lugar", "sets": "3", "reps": "2 min", "rest": "30s", "muscle": "Cardio", "tips": "Eleve bem os joelhos"},
            {"name": "Agachamento", "sets": "3", "reps": "15-20", "rest": "45s", "muscle": "Pernas", "tips": "Movimento controlado"},
            {"name": "Jumping jacks", "sets": "3", "reps": "30s", "rest": "30s", "muscle": "Cardio", "tips": "Mantenha ritmo constante"},
            {"name": "Prancha", "sets": "3", "reps": "20-30s", "rest": "45s", "muscle": "Core", "tips": "Respire normalmente"},
        ],
        Level.INTERMEDIATE: [
            {"name": "Burpee modificado", "sets": "4", "reps": "8-10", "rest": "60s", "muscle": "Corpo todo", "tips": "Sem pulo se necessário"},
            {"name": "Mountain climbers", "sets": "4", "reps": "30s", "rest": "45s", "muscle": "Cardio/Core", "tips": "Movimento rápido"},
            {"name": "Agachamento com salto", "sets": "3", "reps": "12-15", "rest": "60s", "muscle": "Pernas", "tips": "Aterrisse suavemente"},
            {"name": "Prancha dinâmica", "sets": "3", "reps": "20 rep", "rest": "60s", "muscle": "Core", "tips": "Suba e desça dos cotovelos"},
        ],
        Level.ADVANCED: [
            {"name": "HIIT Circuit", "sets": "5", "reps": "45s on/15s off", "rest": "2min entre rounds", "muscle": "Corpo todo", "tips": "Máxima intensidade"},
            {"name": "Burpee com flexão", "sets": "4", "reps": "10-12", "rest": "75s", "muscle": "Corpo todo", "tips": "Adicione flexão no movimento"},
            {"name": "Tabata squats", "sets": "4", "reps": "20s on/10s off", "rest": "60s", "muscle": "Pernas", "tips": "Máxima velocidade"},
            {"name": "Prancha com toque", "sets": "4", "reps": "30-45s", "rest": "60s", "muscle": "Core", "tips": "Toque ombros alternadamente"},
        ],
    },
    # GANHO DE MASSA (Muscle gain)
    Goal.MUSCLE_GAIN: {
        Level.BEGINNER: [
            {"name": "Agachamento", "sets": "4", "reps": "8-10", "rest": "90s", "muscle": "Pernas", "tips": "Foque na forma correta"},
            {"name": "Flexão inclinada", "sets": "3", "reps": "8-12", "rest": "75s", "muscle": "Peito", "tips": "Use banco ou superfície elevada"},
            {"name": "Remada curvada", "sets": "3", "reps": "10-12", "rest": "90s", "muscle": "Costas", "tips": "Aperte as escápulas"},
            {"name": "Desenvolvimento", "sets": "3", "reps": "8-10", "rest": "90s", "muscle": "Ombros", "tips": "Não trave os cotovelos"},
        ],
        Level.INTERMEDIATE: [
            {"name": "Agachamento com pausa", "sets": "4", "reps": "6-8", "rest": "120s", "muscle": "Pernas", "tips": "Pause 2s embaixo"},
            {"name": "Flexão com peso", "sets": "4", "reps": "8-10", "rest": "90s", "muscle": "Peito", "tips": "Use mochila com peso"},
            {"name": "Remada unilateral", "sets": "4", "reps": "8-10 cada braço", "rest": "90s", "muscle": "Costas", "tips": "Foque na contração"},
            {"name": "Desenvolvimento Arnold", "sets": "3", "reps": "8-10", "rest": "90s", "muscle": "Ombros", "tips": "Rotação completa"},
            {"name": "Afundo com peso", "sets": "4", "reps": "8-10 cada perna", "rest": "90s", "muscle": "Pernas", "tips": "Descida controlada"},
        ],
        Level.ADVANCED: [
            {"name": "Agachamento pistol", "sets": "4", "reps": "5-8 cada perna", "rest": "120s", "muscle": "Pernas", "tips": "Uma perna só"},
            {"name": "Flexão archer", "sets": "4", "reps": "6-8 cada lado", "rest": "90s", "muscle": "Peito", "tips": "Peso em um braço"},
            {"name": "Muscle-up assistido", "sets": "4", "reps": "3-5", "rest": "120s", "muscle": "Costas/Braços", "tips": "Use elástico se necessário"},
            {"name": "Handstand push-up", "sets": "3", "reps": "3-6", "rest": "120s", "muscle": "Ombros", "tips": "Use parede para apoio"},
        ],
    },
}

DEFAULT_GOAL = Goal.STRENGTH
DEFAULT_LEVEL = Level.BEGINNER

E = TypeVar("E", bound=enum.Enum)


def _build_catalog() -> Mapping[Goal, Mapping[Level, tuple[Exercise, ...]]]:
    return MappingProxyType({
        goal: MappingProxyType({
            level: tuple(Exercise(**data) for data in exercises)
            for level, exercises in levels.items()
        })
        for goal, levels in EXERCISES.items()
    })


CATALOG = _build_catalog()


def _coerce(enum_cls: type[E], value: Any) -> E | None:
    try:
        return enum_cls(value)
    except ValueError:
        return None


def has_entry(goal: Any, level: Any) -> bool:
    """Check whether the catalog holds a list for this goal/level pair."""
    goal_key = _coerce(Goal, goal)
    level_key = _coerce(Level, level)
    if goal_key is None or level_key is None:
        return False
    return level_key in CATALOG.get(goal_key, {})


def get_exercises(goal: Any, level: Any) -> tuple[Exercise, ...]:
    """Get the exercises for a goal/level pair.

    Any pair the catalog does not hold resolves to strength/beginner, so
    this never raises for malformed input.
    """
    if not has_entry(goal, level):
        return CATALOG[DEFAULT_GOAL][DEFAULT_LEVEL]
    return CATALOG[Goal(goal)][Level(level)]


def iter_catalog() -> Iterator[tuple[Goal, Level, tuple[Exercise, ...]]]:
    """Yield every catalog entry in declaration order."""
    for goal, levels in CATALOG.items():
        for level, exercises in levels.items():
            yield goal, level, exercises
