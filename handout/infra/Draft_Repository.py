"""Local key-value storage and the handout draft repository built on top of it.

`LocalStorage` keeps string values per key in one JSON file, the same contract
a browser's localStorage offers. `DraftRepository` snapshots the treatment
plan under the `handoutDraft` key. Draft persistence is best-effort: storage
errors are logged at debug level and otherwise ignored.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from handout.domain.PlanEntry import PlanEntry
from handout.utilities.config import DRAFT_STORE_FILE
from handout.utilities.constants import DRAFT_KEY

logger = logging.getLogger(__name__)


class LocalStorage:
    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path) if path is not None else DRAFT_STORE_FILE

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, 'r', encoding='utf-8') as f:
            store = json.load(f)
        if not isinstance(store, dict):
            raise ValueError(f"Storage file {self.path} does not hold an object")
        return store

    def _atomic_write(self, store: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".storage_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(store, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, str(self.path))
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        try:
            store = self._read_all()
        except ValueError as e:
            logger.debug("Discarding unreadable storage file %s: %s", self.path, e)
            store = {}
        store[key] = value
        self._atomic_write(store)

    def remove_item(self, key: str) -> None:
        store = self._read_all()
        if key in store:
            del store[key]
            self._atomic_write(store)


class DraftRepository:
    def __init__(self, storage: Optional[LocalStorage] = None, key: str = DRAFT_KEY):
        self.storage = storage or LocalStorage()
        self.key = key

    def persist(self, treatment_plan: Iterable[PlanEntry]) -> bool:
        """Snapshot `{treatmentPlan}`. Returns False when storage is unavailable."""
        payload = {"treatmentPlan": [entry.to_dict() for entry in treatment_plan]}
        try:
            self.storage.set_item(self.key, json.dumps(payload, ensure_ascii=False))
        except (OSError, ValueError, TypeError) as e:
            logger.debug("Could not persist handout draft: %s", e)
            return False
        return True

    def restore(self) -> Optional[List[PlanEntry]]:
        """Return the persisted plan, or None when absent or malformed."""
        try:
            raw = self.storage.get_item(self.key)
            if not raw:
                return None
            draft = json.loads(raw)
            plan = draft.get("treatmentPlan") if isinstance(draft, dict) else None
            if not isinstance(plan, list):
                logger.debug("Ignoring handout draft without a treatmentPlan array")
                return None
            entries = [PlanEntry.from_dict(entry) for entry in plan]
            ids = [entry.id for entry in entries]
            if len(set(ids)) != len(ids):
                logger.debug("Ignoring handout draft with repeated entry ids")
                return None
            return entries
        except (OSError, ValueError) as e:
            logger.debug("Ignoring unreadable handout draft: %s", e)
            return None

    def clear(self) -> bool:
        try:
            self.storage.remove_item(self.key)
        except (OSError, ValueError) as e:
            logger.debug("Could not erase handout draft: %s", e)
            return False
        return True
