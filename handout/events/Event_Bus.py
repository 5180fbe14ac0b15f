"""Simple Event Bus / Observer implementation for handout state changes.

Event names:
  plan.changed       -> payload {"treatment_plan": tuple[PlanEntry, ...], "reason": str}
  plan.cleared       -> payload {"treatment_plan": ()}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
from collections import defaultdict
from typing import Callable, Any, Dict, List
import logging

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
PLAN_CHANGED = "plan.changed"
PLAN_CLEARED = "plan.cleared"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def subscribers(self, event_name: str) -> List[Callable[[str, Any], None]]:
		return list(self._subscribers.get(event_name, []))

	def publish(self, event_name: str, payload: Any):
		# A failing subscriber must not undo a mutation that already happened
		for cb in self.subscribers(event_name):
			try:
				cb(event_name, payload)
			except Exception as e:  # pragma: no cover - defensive
				logger.error("Error delivering %s to %r: %s", event_name, cb, e)


__all__ = ['EventBus', 'PLAN_CHANGED', 'PLAN_CLEARED']
