import copy
import dataclasses
import threading

from ccs.exceptions import ConflictError, NotFound
from ccs.store.entity_store import EntityStore


class InMemoryEntityStore(EntityStore):
    """
    An entity store keeping records in process memory. Records are copied on the way in and out so callers can never
    mutate stored state without going through the store.
    """
    def __init__(self):
        self._lock = threading.RLock()
        self._records = {}

    def create(self, record):
        with self._lock:
            records = self._records.setdefault(type(record), {})
            if record.id in records:
                raise ConflictError(f"{type(record).__name__} with id [{record.id}] already exists.")
            records[record.id] = copy.deepcopy(record)
            return copy.deepcopy(record)

    def get(self, record_type, record_id):
        with self._lock:
            record = self._records.get(record_type, {}).get(record_id)
            return copy.deepcopy(record)

    def update(self, record_type, record_id, changes):
        with self._lock:
            records = self._records.get(record_type, {})
            if record_id not in records:
                raise NotFound(f"{record_type.__name__} with id [{record_id}] does not exist.")
            updated = dataclasses.replace(records[record_id], **changes)
            records[record_id] = updated
            return copy.deepcopy(updated)

    def delete(self, record_type, record_id):
        with self._lock:
            return self._records.get(record_type, {}).pop(record_id, None) is not None

    def list(self, record_type, **filters):
        with self._lock:
            return [copy.deepcopy(r) for r in self._records.get(record_type, {}).values()
                    if all(getattr(r, k) == v for k, v in filters.items())]
