"""Selection control: resolve free text to a catalog medication and track the selection.

Provides find_med_by_name(meds, text) and update_selection(state, med).
"""
from typing import Iterable, Optional

from handout.domain.HandoutState import HandoutState
from handout.domain.Medication import Medication


def find_med_by_name(meds: Iterable[Medication], text: Optional[str]) -> Optional[Medication]:
    """First medication whose name or alias equals `text` (case-insensitive, trimmed).

    No fuzzy or partial matching; empty text never matches.
    """
    if not text or not text.strip():
        return None
    for med in meds:
        if med.matches(text):
            return med
    return None


def update_selection(state: HandoutState, med: Optional[Medication]) -> HandoutState:
    """Return a state whose selection is `med`; None clears it."""
    return state.evolve(selected=med)


def select_by_text(state: HandoutState, text: Optional[str]) -> HandoutState:
    return update_selection(state, find_med_by_name(state.meds, text))
