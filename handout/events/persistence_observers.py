"""Persistence observers: snapshot the handout draft whenever the plan changes.

`attach(bus, repository)` subscribes a DraftRepository to plan events:
  - plan.changed -> repository.persist(treatment_plan)
  - plan.cleared -> repository.clear()
The repository already swallows storage failures, so a session keeps working
without persistence when storage is unavailable.
"""
from __future__ import annotations
from typing import Any, Callable, Dict

from handout.infra.Draft_Repository import DraftRepository
from .Event_Bus import EventBus, PLAN_CHANGED, PLAN_CLEARED


def attach(bus: EventBus, repository: DraftRepository) -> Dict[str, Callable[[str, Any], None]]:
    """Subscribe persistence callbacks and return them (keyed by event) for detaching."""

    def _on_plan_changed(event_name: str, payload: Any):
        repository.persist(payload.get('treatment_plan', ()))

    def _on_plan_cleared(event_name: str, payload: Any):
        repository.clear()

    bus.subscribe(PLAN_CHANGED, _on_plan_changed)
    bus.subscribe(PLAN_CLEARED, _on_plan_cleared)
    return {PLAN_CHANGED: _on_plan_changed, PLAN_CLEARED: _on_plan_cleared}


def detach(bus: EventBus, callbacks: Dict[str, Callable[[str, Any], None]]) -> None:
    for event_name, cb in callbacks.items():
        bus.unsubscribe(event_name, cb)


__all__ = ['attach', 'detach']
