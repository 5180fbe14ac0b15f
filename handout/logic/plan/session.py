"""Handout session: the application store.

Holds the current HandoutState, applies the pure update functions from
`builder` and `matcher`, re-renders both views after every mutation and
publishes plan events so the persistence observer snapshots the draft.
"""
import logging
from typing import Iterable, Optional

import httpx

from handout.domain.HandoutState import HandoutState
from handout.domain.Medication import Medication
from handout.domain.PlanEntry import PlanEntry
from handout.events import persistence_observers
from handout.events.Event_Bus import EventBus
from handout.events.event_helpers import (
    publish_plan_changed,
    publish_plan_cleared,
)
from handout.infra.Draft_Repository import DraftRepository
from handout.infra.Medication_Repository import load_medications
from handout.logic.plan import builder
from handout.logic.rendering.views import render_handout, render_medication_list
from handout.logic.selection.matcher import find_med_by_name, update_selection

logger = logging.getLogger(__name__)


class HandoutSession:
    def __init__(self, meds: Iterable[Medication] = (), repository: Optional[DraftRepository] = None,
                 bus: Optional[EventBus] = None):
        self.repository = repository or DraftRepository()
        self.bus = bus or EventBus()
        self._observers = persistence_observers.attach(self.bus, self.repository)
        self._state = HandoutState(meds=meds)
        self.views = {}
        self._render()

    @classmethod
    async def start(cls, source=None, repository: Optional[DraftRepository] = None,
                    client: Optional[httpx.AsyncClient] = None) -> "HandoutSession":
        """Load the catalog (awaited once), then restore the persisted draft."""
        meds = await load_medications(source, client=client)
        session = cls(meds=meds, repository=repository)
        session.restore()
        return session

    @property
    def state(self) -> HandoutState:
        return self._state

    def _render(self):
        self.views = {
            "list": render_medication_list(self._state.treatment_plan),
            "handout": render_handout(self._state.treatment_plan),
        }

    def restore(self) -> bool:
        entries = self.repository.restore()
        if entries is None:
            return False
        self._state = builder.replace_plan(self._state, entries)
        self._render()
        logger.info("Restored handout draft with %d entries", len(entries))
        return True

    def select(self, text: Optional[str]) -> Optional[Medication]:
        med = find_med_by_name(self._state.meds, text)
        self._state = update_selection(self._state, med)
        return med

    def add(self, directions: Optional[str] = "", instructions: Optional[str] = "",
            notes: Optional[str] = "", med_search: Optional[str] = None) -> PlanEntry:
        """Add an entry for the selected medication.

        When `med_search` is given the selection is resolved from it first, the
        way a change on the search box precedes a click on the add button.

        Raises:
            PlanValidationError: nothing selected or all fields empty; state unchanged.
        """
        if med_search is not None:
            self.select(med_search)
        self._state = builder.add_medication_to_plan(self._state, directions, instructions, notes)
        entry = self._state.treatment_plan[-1]
        self._render()
        publish_plan_changed(self.bus, self._state.treatment_plan, reason="added")
        logger.info("Added %s to plan (total %d)", entry.name, len(self._state.treatment_plan))
        return entry

    def remove(self, entry_id: int) -> bool:
        before = len(self._state.treatment_plan)
        self._state = builder.remove_medication_from_plan(self._state, entry_id)
        removed = len(self._state.treatment_plan) < before
        self._render()
        publish_plan_changed(self.bus, self._state.treatment_plan, reason="removed")
        if removed:
            logger.info("Removed entry %s from plan", entry_id)
        return removed

    def clear_all(self):
        self._state = builder.clear_all(self._state)
        self._render()
        publish_plan_cleared(self.bus)
        logger.info("Cleared treatment plan")

    def close(self):
        persistence_observers.detach(self.bus, self._observers)
