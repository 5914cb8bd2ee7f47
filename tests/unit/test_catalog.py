"""Tests for the static exercise catalog."""
import pytest
from pydantic import ValidationError

from src.domains.generator.catalog import CATALOG, get_exercises, has_entry, iter_catalog
from src.domains.generator.models import Goal, Level, TimeAvailable, raw_value
from src.domains.generator.schemas import Exercise


class TestCatalogShape:
    """Tests for the catalog contents."""

    def test_has_nine_entries(self):
        """Should hold every goal/level combination."""
        entries = list(iter_catalog())

        assert len(entries) == 9
        assert {(goal, level) for goal, level, _ in entries} == {
            (goal, level) for goal in Goal for level in Level
        }

    @pytest.mark.parametrize("goal", list(Goal))
    @pytest.mark.parametrize("level", list(Level))
    def test_entries_hold_four_or_five_exercises(self, goal, level):
        exercises = CATALOG[goal][level]

        assert 4 <= len(exercises) <= 5
        assert all(isinstance(e, Exercise) for e in exercises)

    def test_muscle_gain_intermediate_order(self):
        """Should keep the curated execution order."""
        names = [e.name for e in CATALOG[Goal.MUSCLE_GAIN][Level.INTERMEDIATE]]

        assert names == [
            "Agachamento com pausa",
            "Flexão com peso",
            "Remada unilateral",
            "Desenvolvimento Arnold",
            "Afundo com peso",
        ]

    def test_display_strings_kept_verbatim(self):
        """Should not parse sets, reps or rest."""
        hiit = CATALOG[Goal.WEIGHT_LOSS][Level.ADVANCED][0]

        assert hiit.name == "HIIT Circuit"
        assert hiit.sets == "5"
        assert hiit.reps == "45s on/15s off"
        assert hiit.rest == "2min entre rounds"
        assert hiit.muscle == "Corpo todo"


class TestCatalogImmutability:
    """Tests for read-only catalog state."""

    def test_goal_mapping_is_read_only(self):
        with pytest.raises(TypeError):
            CATALOG[Goal.STRENGTH] = {}  # type: ignore[index]

    def test_level_mapping_is_read_only(self):
        with pytest.raises(TypeError):
            CATALOG[Goal.STRENGTH][Level.BEGINNER] = ()  # type: ignore[index]

    def test_exercise_lists_are_tuples(self):
        assert isinstance(CATALOG[Goal.STRENGTH][Level.BEGINNER], tuple)

    def test_exercises_are_frozen(self):
        exercise = CATALOG[Goal.STRENGTH][Level.BEGINNER][0]

        with pytest.raises(ValidationError):
            exercise.name = "Outro"


class TestLookup:
    """Tests for has_entry and get_exercises."""

    def test_has_entry_accepts_enums_and_strings(self):
        assert has_entry(Goal.MUSCLE_GAIN, Level.ADVANCED) is True
        assert has_entry("muscle_gain", "advanced") is True

    @pytest.mark.parametrize(
        "goal,level",
        [("yoga", "beginner"), ("strength", "pro"), (None, "beginner"), ([], [])],
    )
    def test_has_entry_rejects_unknown_pairs(self, goal, level):
        assert has_entry(goal, level) is False

    def test_get_exercises_by_string(self):
        assert get_exercises("weight_loss", "intermediate") == CATALOG[Goal.WEIGHT_LOSS][Level.INTERMEDIATE]

    def test_get_exercises_falls_back(self):
        """Should resolve unknown pairs to strength/beginner."""
        assert get_exercises("cardio", "beginner") == CATALOG[Goal.STRENGTH][Level.BEGINNER]
        assert get_exercises("weight_loss", 3) == CATALOG[Goal.STRENGTH][Level.BEGINNER]


class TestRawValue:
    """Tests for raw_value."""

    def test_unwraps_enum_members(self):
        assert raw_value(Goal.WEIGHT_LOSS) == "weight_loss"
        assert type(raw_value(TimeAvailable.MIN_45)) is str

    @pytest.mark.parametrize("value", ["45", 30, None, ["strength"]])
    def test_leaves_other_values(self, value):
        assert raw_value(value) == value
