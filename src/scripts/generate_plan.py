"""
Generate a workout plan from the command line and print it.

Run with:
    python -m src.scripts.generate_plan --name Ana --age 30 --weight 62 --height 165 \
        --goal muscle_gain --level intermediate --time 45 --days "4 dias" \
        --equipment Halteres --equipment "Peso corporal"
"""

import argparse
import sys

from pydantic import ValidationError

from src.domains.generator.models import DaysPerWeek, Equipment, Goal, Level, TimeAvailable
from src.domains.generator.printing import render_plan_text
from src.domains.generator.schemas import WorkoutProfile, translate_validation_errors
from src.domains.generator.service import generate_plan


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Gerar treino personalizado")
    parser.add_argument("--name", required=True, help="Nome")
    parser.add_argument("--age", type=int, required=True, help="Idade (16-80)")
    parser.add_argument("--weight", type=float, required=True, help="Peso em kg (40-200)")
    parser.add_argument("--height", type=float, required=True, help="Altura em cm (140-220)")
    parser.add_argument("--goal", required=True, choices=[g.value for g in Goal])
    parser.add_argument("--level", required=True, choices=[lv.value for lv in Level])
    parser.add_argument("--time", dest="time_available", required=True, choices=[t.value for t in TimeAvailable])
    parser.add_argument("--days", dest="days_per_week", required=True, choices=[d.value for d in DaysPerWeek])
    parser.add_argument(
        "--equipment",
        action="append",
        default=[],
        choices=[e.value for e in Equipment],
        help="Equipamento disponível (repita para mais de um)",
    )
    parser.add_argument("--limitations", default=None, help="Limitações ou lesões")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, generate the plan and print it."""
    args = build_parser().parse_args(argv)

    try:
        profile = WorkoutProfile(**vars(args))
    except ValidationError as e:
        for error in translate_validation_errors(e.errors()):
            print(f"{error.field}: {error.message}", file=sys.stderr)
        return 2

    plan = generate_plan(profile)
    print(render_plan_text(plan, name=profile.name), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
