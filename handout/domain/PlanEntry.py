"""Plan entry domain entity: one medication line of the handout with its free-text fields."""
import math

TEXT_FIELDS = ("directions", "instructions", "notes")


class PlanEntry:
    def __init__(self, id: int, name: str = "", image: str = "",
                 directions: str = "", instructions: str = "", notes: str = ""):
        self.id = id
        self.name = name
        self.image = image
        self.directions = directions
        self.instructions = instructions
        self.notes = notes

    def __str__(self) -> str:
        parts = [f"#{self.id} {self.name}"]
        for field in TEXT_FIELDS:
            value = getattr(self, field)
            if value:
                parts.append(f"{field.capitalize()}: {value}")
        return " - ".join(parts)

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, PlanEntry):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash(self.id)

    @staticmethod
    def from_dict(data):
        '''Creates a PlanEntry from a persisted record.

        Raises ValueError when the record is not an object or has no integer id,
        so a restore can discard the whole draft.
        '''
        if not isinstance(data, dict):
            raise ValueError(f"Plan entry must be an object, got {type(data).__name__}")
        entry_id = data.get("id")
        if isinstance(entry_id, bool) or not isinstance(entry_id, (int, float)):
            raise ValueError(f"Plan entry id must be a number, got {entry_id!r}")
        if not math.isfinite(entry_id):
            raise ValueError(f"Plan entry id must be finite, got {entry_id!r}")

        def _text(key):
            value = data.get(key)
            return value if isinstance(value, str) else ""

        return PlanEntry(
            id=int(entry_id),
            name=_text("name"),
            image=_text("image"),
            directions=_text("directions"),
            instructions=_text("instructions"),
            notes=_text("notes"),
        )

    def to_dict(self):
        '''Converts the PlanEntry to the persisted draft shape.'''
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "directions": self.directions,
            "instructions": self.instructions,
            "notes": self.notes,
        }
