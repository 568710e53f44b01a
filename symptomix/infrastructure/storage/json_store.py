"""Record collections persisted as one JSON file each."""
import json
import logging
import os
import tempfile
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from symptomix.application.errors import PersistenceReadError, PersistenceWriteError
from symptomix.application.ports import RecordStorePort
from symptomix.domain.models import StoredRecord


logger = logging.getLogger(__name__)

T = TypeVar("T", bound=StoredRecord)


class JsonRecordStore(RecordStorePort):
    """Stores each collection as ``<data_dir>/<collection>.json``.

    Writes are a full read-modify-write of the collection file, so every
    mutating call holds that collection's lock from load to save.
    """

    def __init__(self, data_dir: str):
        """
        Args:
            data_dir: Directory holding the collection files. Created if missing.
        """
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: Dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def _path(self, collection: str) -> Path:
        return self.data_dir / f"{collection}.json"

    def _lock(self, collection: str) -> threading.RLock:
        with self._locks_guard:
            lock = self._locks.get(collection)
            if lock is None:
                lock = self._locks[collection] = threading.RLock()
            return lock

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    def _read(self, collection: str, model: Type[T]) -> List[T]:
        path = self._path(collection)
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError:
            return []
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceReadError(f"Cannot read {path}: {e}") from e

        if not raw.strip():
            return []
        try:
            return TypeAdapter(List[model]).validate_json(raw)
        except ValidationError as e:
            raise PersistenceReadError(f"Corrupt collection file {path}: {e}") from e

    def load_all(self, collection: str, model: Type[T]) -> List[T]:
        try:
            return self._read(collection, model)
        except PersistenceReadError as e:
            logger.warning("Treating collection %r as empty: %s", collection, e)
            return []

    def save_all(self, collection: str, records: Sequence[StoredRecord]) -> None:
        path = self._path(collection)
        payload = [r.model_dump(mode="json", by_alias=True) for r in records]
        with self._lock(collection):
            tmp_path = None
            try:
                fd, tmp_path = tempfile.mkstemp(
                    dir=self.data_dir, prefix=f".{collection}.", suffix=".tmp"
                )
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(payload, f, indent=2)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_path, path)
            except OSError as e:
                logger.exception("Failed to save collection %r", collection)
                if tmp_path and os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise PersistenceWriteError(f"Cannot write {path}: {e}") from e

    def _load_for_write(self, collection: str, model: Type[T]) -> List[T]:
        # Writing back after a failed read would drop every record in the file.
        try:
            return self._read(collection, model)
        except PersistenceReadError as e:
            logger.error("Refusing to modify collection %r: %s", collection, e)
            raise PersistenceWriteError(f"Collection {collection!r} is unreadable: {e}") from e

    def get_by_id(self, collection: str, record_id: str, model: Type[T]) -> Optional[T]:
        for record in self.load_all(collection, model):
            if record.id == record_id:
                return record
        return None

    def add(self, collection: str, record: StoredRecord) -> str:
        record_id = str(uuid.uuid4())
        stored = record.with_id(record_id).stamp_created(self._now())
        with self._lock(collection):
            records = self._load_for_write(collection, type(record))
            records.append(stored)
            self.save_all(collection, records)
        return record_id

    def update(self, collection: str, record_id: str, record: StoredRecord) -> bool:
        with self._lock(collection):
            records = self._load_for_write(collection, type(record))
            for index, existing in enumerate(records):
                if existing.id == record_id:
                    records[index] = record.with_id(record_id).stamp_updated(self._now())
                    self.save_all(collection, records)
                    return True
        return False

    def delete(self, collection: str, record_id: str, model: Type[T]) -> bool:
        with self._lock(collection):
            records = self._load_for_write(collection, model)
            for index, existing in enumerate(records):
                if existing.id == record_id:
                    del records[index]
                    self.save_all(collection, records)
                    return True
        return False
