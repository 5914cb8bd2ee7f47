"""Plain-text rendering of a workout plan for printing."""
from src.domains.generator.schemas import WorkoutPlan


def render_plan_text(plan: WorkoutPlan, name: str | None = None) -> str:
    """Render the plan as a printable sheet."""
    lines = ["Seu Treino Personalizado"]
    if name:
        lines.append(f"Treino criado especialmente para você, {name}!")
    lines += [
        "",
        plan.title,
        f"{plan.duration} • {plan.frequency}",
        "",
        "Exercícios",
    ]

    for index, exercise in enumerate(plan.exercises, start=1):
        lines.append(f"{index}. {exercise.name} ({exercise.muscle})")
        lines.append(f"   Séries: {exercise.sets} | Reps: {exercise.reps} | Descanso: {exercise.rest}")
        lines.append(f"   {exercise.tips}")

    lines += ["", "Dicas Importantes"]
    lines += [f"- {tip}" for tip in plan.tips]

    return "\n".join(lines) + "\n"
