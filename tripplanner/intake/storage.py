"""
Persistent key/value store for submitted trip requests.

A small JSON-file store with ``localStorage`` semantics: string values
under string keys, whole-value replacement on write, no expiry.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from tripplanner.shared.contracts.trip_request import TripRequest


logger = logging.getLogger(__name__)

TRIP_FORM_DATA_KEY = "tripFormData"
DEFAULT_STORE_PATH = "trip_store.json"


class TripStoreCorruptError(ValueError):
    """Raised when the store file exists but is not a JSON object."""

    pass


class TripStore:
    """JSON-file backed key/value store."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        if path is None:
            path = os.environ.get("TRIP_PLANNER_STORE_PATH", DEFAULT_STORE_PATH)
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise TripStoreCorruptError(f"Store file {self.path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise TripStoreCorruptError(
                f"Store file {self.path} holds {type(data).__name__}, expected an object"
            )
        return data

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Write beside the target and swap it in so readers never see a partial file
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._read()
        except TripStoreCorruptError as e:
            # A new submission replaces an unreadable store
            logger.warning(f"[store={self.path}] Discarding unreadable store | {e}")
            data = {}
        data[key] = value
        self._write(data)


def save_trip_request(
    store: TripStore,
    trip_request: TripRequest,
    key: str = TRIP_FORM_DATA_KEY,
) -> None:
    """Write the request under ``key``, replacing any previous submission."""
    store.set_item(key, json.dumps(trip_request.to_wire()))
    logger.info(
        f"[store={store.path}] Trip request saved | key={key}, "
        f"dates={trip_request.start_date}..{trip_request.end_date}, "
        f"people={trip_request.number_of_people}"
    )


def read_trip_request(
    store: TripStore,
    key: str = TRIP_FORM_DATA_KEY,
) -> Optional[TripRequest]:
    """
    Read the stored request, or None when nothing was submitted.

    Raises:
        TripStoreCorruptError: If the store file cannot be read as JSON.
        pydantic.ValidationError: If the stored value is not a TripRequest.
    """
    raw = store.get_item(key)
    if raw is None:
        return None
    return TripRequest.model_validate_json(raw)
