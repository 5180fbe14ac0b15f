"""Medication catalog loading (local JSON file or http(s) resource) with built-in fallback."""
import json
import logging
import time
from pathlib import Path
from typing import List, Optional, Union

import httpx

from handout.domain.Medication import Medication
from handout.utilities.config import MEDICATIONS_SOURCE
from handout.utilities.constants import DEFAULT_MEDS

logger = logging.getLogger(__name__)

FALLBACK_HINT = "Using built-in medication list fallback. To customize, edit data/medications.json."


def default_medications() -> List[Medication]:
    return [Medication.from_dict(entry) for entry in DEFAULT_MEDS]


def parse_medications(data) -> List[Medication]:
    """Turn a decoded catalog document into Medication objects.

    A document that is not an array yields an empty catalog; records without a
    usable name are skipped.
    """
    if not isinstance(data, list):
        logger.warning("Medication catalog is not a JSON array (got %s); catalog is empty.", type(data).__name__)
        return []
    meds = []
    for entry in data:
        med = Medication.from_dict(entry)
        if med is None:
            logger.debug("Skipping unusable catalog record: %r", entry)
            continue
        meds.append(med)
    return meds


def reading_from_medications(path: Union[str, Path]) -> List[Medication]:
    """Read the catalog from a JSON file, falling back to the built-in list on any failure."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning("Medications file not found: %s. %s", path, FALLBACK_HINT)
        return default_medications()
    except json.JSONDecodeError as e:
        logger.warning("Invalid JSON in medications file %s: %s. %s", path, e, FALLBACK_HINT)
        return default_medications()
    except OSError as e:
        logger.warning("Could not read medications file %s: %s. %s", path, e, FALLBACK_HINT)
        return default_medications()
    return parse_medications(data)


async def fetch_medications(url: str, client: Optional[httpx.AsyncClient] = None) -> List[Medication]:
    """Fetch the catalog over HTTP with a cache-busting query parameter.

    Any transport error, non-success status or undecodable body yields the
    built-in list. No retry.
    """
    params = {"_": str(int(time.time() * 1000))}
    try:
        if client is None:
            async with httpx.AsyncClient() as own_client:
                response = await own_client.get(url, params=params)
        else:
            response = await client.get(url, params=params)
        if response.status_code != 200:
            raise httpx.HTTPStatusError(
                f"HTTP {response.status_code}", request=response.request, response=response
            )
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("%s (%s: %s)", FALLBACK_HINT, type(e).__name__, e)
        return default_medications()
    return parse_medications(data)


def _is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


async def load_medications(source: Union[str, Path, None] = None,
                           client: Optional[httpx.AsyncClient] = None) -> List[Medication]:
    """Load the catalog from the configured source (file path or URL)."""
    source = MEDICATIONS_SOURCE if source is None else source
    if isinstance(source, str) and _is_url(source):
        meds = await fetch_medications(source, client=client)
    else:
        meds = reading_from_medications(source)
    logger.info("Loaded %d medications from %s", len(meds), source)
    return meds
