"""Event helper utilities.

Small publishing helpers so the session never builds payload dicts inline.

Quick import:
    from handout.events.event_helpers import (
        publish_plan_changed, publish_plan_cleared
    )
"""
from __future__ import annotations
from typing import Any, Iterable

from .Event_Bus import EventBus, PLAN_CHANGED, PLAN_CLEARED

__all__ = ['publish_plan_changed', 'publish_plan_cleared']


def publish_plan_changed(bus: EventBus, treatment_plan: Iterable[Any], reason: str):
    """Publish a plan.changed event (reason: 'added' or 'removed')."""
    bus.publish(PLAN_CHANGED, {
        'treatment_plan': tuple(treatment_plan),
        'reason': reason,
    })


def publish_plan_cleared(bus: EventBus):
    bus.publish(PLAN_CLEARED, {'treatment_plan': ()})
