"""Terminal rendering for uttermatch.

All render functions are pure: they take results and return Rich
renderables. No side effects, no mutation.
"""

from collections.abc import Sequence

from rich.table import Table
from rich.text import Text

from uttermatch.core.model import InteractionModel
from uttermatch.core.resolve import Resolution


def format_slots(resolution: Resolution) -> str:
    """Render ``name=value`` pairs, or ``--`` when there are none."""
    if not resolution.slot_names:
        return "--"
    return ", ".join(
        f"{name}={value!r}"
        for name, value in zip(resolution.slot_names, resolution.slot_values)
    )


def render_resolutions(resolutions: Sequence[Resolution]) -> Table:
    """Render one row per utterance with its intent, slots and scores."""
    table = Table(title="Resolutions")
    table.add_column("Utterance", style="white")
    table.add_column("Intent", style="cyan")
    table.add_column("Slots", style="green")
    table.add_column("Score", justify="right")
    for resolution in resolutions:
        if not resolution.matched or resolution.evaluation is None:
            table.add_row(
                resolution.utterance, Text("no match", style="red"), "--", "--"
            )
            continue
        evaluation = resolution.evaluation
        table.add_row(
            resolution.utterance,
            resolution.intent_name or "",
            format_slots(resolution),
            f"{evaluation.score}/{evaluation.typed_score}",
        )
    return table


def render_intents(model: InteractionModel) -> Table:
    """Render the model's intents with their slots and sample counts."""
    table = Table(title="Intents")
    table.add_column("Intent", style="cyan")
    table.add_column("Slots", style="white")
    table.add_column("Samples", justify="right", style="green")
    for intent in model.schema.intents():
        slots = ", ".join(f"{s.name}:{s.type}" for s in intent.slots) or "--"
        name = Text(intent.name, style="dim" if intent.builtin else "")
        table.add_row(name, slots, str(len(model.samples.samples_for(intent.name))))
    return table
