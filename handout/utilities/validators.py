"""
Input validation schemas using Pydantic for the JSON API.

Validation is limited to trimming; the only content rule (a selection plus
at least one non-empty field) is enforced by the plan builder.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


def _strip(v):
    if isinstance(v, str):
        return v.strip()
    return v


class SelectionInput(BaseModel):
    """Schema for resolving the current selection from search text."""
    med_search: str = Field(default="", max_length=200)

    @field_validator('med_search')
    @classmethod
    def strip_whitespace(cls, v):
        return _strip(v)


class PlanEntryInput(BaseModel):
    """Schema for adding a plan entry. `med_search`, when given, replaces the selection first."""
    med_search: Optional[str] = None
    directions: str = ""
    instructions: str = ""
    notes: str = ""

    @field_validator('med_search', 'directions', 'instructions', 'notes', mode='before')
    @classmethod
    def strip_text(cls, v):
        """Remove leading/trailing whitespace; null text fields become empty."""
        if v is None:
            return v
        return _strip(v)

    @field_validator('directions', 'instructions', 'notes', mode='before')
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v


class MedicationOut(BaseModel):
    """Catalog record as exposed by the API."""
    name: str
    image: str = ""
    aliases: List[str] = Field(default_factory=list)


class PlanEntryOut(BaseModel):
    """Plan entry in the persisted draft shape."""
    id: int
    name: str
    image: str = ""
    directions: str = ""
    instructions: str = ""
    notes: str = ""
