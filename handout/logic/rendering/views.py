"""Render layer: pure functions from the treatment plan to HTML fragments.

render_medication_list(plan) -> compact editable summary list
render_handout(plan)         -> print-oriented handout
Both re-render completely on every call; an empty plan yields a placeholder.
"""
from functools import lru_cache
from typing import Iterable

from jinja2 import Environment, FileSystemLoader, select_autoescape

from handout.domain.PlanEntry import PlanEntry
from handout.utilities.config import TEMPLATES_DIR
from handout.utilities.constants import EMPTY_HANDOUT_MESSAGE, EMPTY_LIST_MESSAGE

# (field, label) in display order
FIELD_LABELS = (
    ("directions", "Directions"),
    ("instructions", "Instructions"),
    ("notes", "Notes"),
)


@lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def _render(template_name: str, **context) -> str:
    return _environment().get_template(template_name).render(fields=FIELD_LABELS, **context)


def render_medication_list(plan: Iterable[PlanEntry], removable: bool = True) -> str:
    return _render(
        "partials/_medication_list.html",
        plan=list(plan),
        removable=removable,
        empty_message=EMPTY_LIST_MESSAGE,
    )


def render_handout(plan: Iterable[PlanEntry], removable: bool = True) -> str:
    return _render(
        "partials/_handout.html",
        plan=list(plan),
        removable=removable,
        empty_message=EMPTY_HANDOUT_MESSAGE,
    )
