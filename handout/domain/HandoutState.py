"""Handout application state: catalog, current selection and the ordered treatment plan.

Instances are treated as values. Update functions build a new state with
`evolve` instead of mutating the one they were given.
"""
from typing import Iterable, Optional

from handout.domain.Medication import Medication
from handout.domain.PlanEntry import PlanEntry

_UNSET = object()


class HandoutState:
    def __init__(self, meds: Iterable[Medication] = (), selected: Optional[Medication] = None,
                 treatment_plan: Iterable[PlanEntry] = ()):
        self.meds = tuple(meds)
        self.selected = selected
        self.treatment_plan = tuple(treatment_plan)

    def __repr__(self) -> str:
        selected = self.selected.name if self.selected else None
        return f"HandoutState(meds={len(self.meds)}, selected={selected!r}, plan={len(self.treatment_plan)})"

    def evolve(self, meds=_UNSET, selected=_UNSET, treatment_plan=_UNSET) -> "HandoutState":
        return HandoutState(
            meds=self.meds if meds is _UNSET else meds,
            selected=self.selected if selected is _UNSET else selected,
            treatment_plan=self.treatment_plan if treatment_plan is _UNSET else treatment_plan,
        )

    @property
    def has_selection(self) -> bool:
        return self.selected is not None

    @property
    def is_empty(self) -> bool:
        return not self.treatment_plan

    @property
    def med_names(self) -> list[str]:
        """Autocomplete source."""
        return [m.name for m in self.meds]

    def entry_ids(self) -> list[int]:
        return [entry.id for entry in self.treatment_plan]
