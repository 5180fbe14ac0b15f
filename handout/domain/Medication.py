"""Medication domain entity: catalog reference data (name, image path, aliases)."""
from typing import List, Optional


class Medication:
    def __init__(self, name: str = "", image: str = "", aliases: Optional[List[str]] = None):
        self.name = name
        self.image = image or ""
        self.aliases = tuple(aliases) if aliases else ()

    def __str__(self) -> str:
        if self.aliases:
            return f"{self.name} (aka {', '.join(self.aliases)})"
        return self.name

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, Medication):
            return NotImplemented
        return (self.name, self.image, self.aliases) == (other.name, other.image, other.aliases)

    def __hash__(self):
        return hash((self.name, self.image, self.aliases))

    def matches(self, text: str) -> bool:
        '''Case-insensitive exact match against the name or any alias.'''
        needle = (text or "").strip().lower()
        if not needle:
            return False
        if self.name.lower() == needle:
            return True
        return any(alias.lower() == needle for alias in self.aliases)

    @staticmethod
    def from_dict(data):
        '''Creates a Medication from a catalog record. Returns None for unusable records.'''
        if not isinstance(data, dict):
            return None
        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            return None
        image = data.get("image") if isinstance(data.get("image"), str) else ""
        raw_aliases = data.get("aliases")
        if not isinstance(raw_aliases, list):
            raw_aliases = []
        aliases = [a for a in raw_aliases if isinstance(a, str)]
        return Medication(name=name, image=image, aliases=aliases)

    def to_dict(self):
        return {
            "name": self.name,
            "image": self.image,
            "aliases": list(self.aliases),
        }
