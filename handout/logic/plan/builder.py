"""Plan builder: pure update functions over HandoutState.

Each function returns a new state and leaves its input untouched. Rendering
and persistence happen in the session that applies these updates.
"""
import time
from typing import Callable, Iterable, Optional

from handout.domain.HandoutState import HandoutState
from handout.domain.PlanEntry import PlanEntry
from handout.domain.exceptions import PlanValidationError
from handout.utilities.constants import EMPTY_FIELDS_MESSAGE, NO_SELECTION_MESSAGE


def _now_ms() -> int:
    return int(time.time() * 1000)


def next_entry_id(plan: Iterable[PlanEntry], clock: Callable[[], int] = _now_ms) -> int:
    """Creation-time id in milliseconds, bumped past the largest id already in the plan.

    Two additions inside the same millisecond still get distinct, increasing ids.
    """
    candidate = clock()
    existing = [entry.id for entry in plan]
    if existing and candidate <= max(existing):
        candidate = max(existing) + 1
    return candidate


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def add_medication_to_plan(state: HandoutState, directions: Optional[str] = "",
                           instructions: Optional[str] = "", notes: Optional[str] = "",
                           clock: Callable[[], int] = _now_ms) -> HandoutState:
    """Append an entry for the selected medication and reset the selection.

    Raises:
        PlanValidationError: no medication is selected, or all three text
            fields are empty. The plan is left unchanged.
    """
    if state.selected is None:
        raise PlanValidationError(NO_SELECTION_MESSAGE, code="no_selection")

    directions, instructions, notes = _clean(directions), _clean(instructions), _clean(notes)
    if not (directions or instructions or notes):
        raise PlanValidationError(EMPTY_FIELDS_MESSAGE, code="empty_fields",
                                  details={"medication": state.selected.name})

    entry = PlanEntry(
        id=next_entry_id(state.treatment_plan, clock),
        name=state.selected.name,
        image=state.selected.image,
        directions=directions,
        instructions=instructions,
        notes=notes,
    )
    return state.evolve(treatment_plan=state.treatment_plan + (entry,), selected=None)


def remove_medication_from_plan(state: HandoutState, entry_id: int) -> HandoutState:
    """Drop the entry with `entry_id`; unknown ids leave the plan as it was."""
    remaining = tuple(entry for entry in state.treatment_plan if entry.id != entry_id)
    return state.evolve(treatment_plan=remaining)


def clear_all(state: HandoutState) -> HandoutState:
    """Empty the plan and reset the form selection. The catalog is kept."""
    return state.evolve(treatment_plan=(), selected=None)


def replace_plan(state: HandoutState, entries: Iterable[PlanEntry]) -> HandoutState:
    """Used when a persisted draft is restored."""
    return state.evolve(treatment_plan=tuple(entries))
