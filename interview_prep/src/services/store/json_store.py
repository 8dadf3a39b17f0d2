"""Base class for collections persisted as JSON files.

Each store keeps one JSON array of records on disk. Every read and write goes
through a thread lock so concurrent requests never interleave file access.
"""

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class JsonFileStore:
    """A thread-safe collection of JSON records stored in a single file.

    Attributes:
        file_path (Path): Path to the JSON file holding the records
        lock (threading.Lock): Thread lock for safe concurrent file access
    """

    def __init__(self, file_path: Path) -> None:
        """Initialize the store and create its file if needed.

        Args:
            file_path: Path to the JSON file holding the records
        """
        self.file_path = Path(file_path)
        self.lock = threading.Lock()
        self.initialize_storage()

    def initialize_storage(self) -> None:
        """Create the storage file as an empty JSON array if it doesn't exist."""
        try:
            if not self.file_path.exists():
                self.file_path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.file_path, "w") as f:
                    json.dump([], f)
                logger.info(f"Storage file initialized at {self.file_path}")
        except OSError as e:
            logger.error(f"Error initializing storage file {self.file_path}: {str(e)}")

    def _load(self) -> List[Record]:
        """Read all records. Callers must hold the lock."""
        if not self.file_path.exists() or os.path.getsize(self.file_path) == 0:
            return []
        with open(self.file_path, "r") as f:
            try:
                records: List[Record] = json.load(f)
            except json.JSONDecodeError:
                logger.error(f"Invalid JSON in {self.file_path}. Treating as empty.")
                return []
        logger.debug(f"Loaded {len(records)} records from {self.file_path}")
        return records

    def _dump(self, records: List[Record]) -> None:
        """Write all records. Callers must hold the lock."""
        # Serialize first so a bad record never truncates the file
        content = json.dumps(records, indent=2)
        with open(self.file_path, "w") as f:
            f.write(content)

    def find(self, predicate: Callable[[Record], bool]) -> List[Record]:
        """Return all records matching a predicate.

        Args:
            predicate: Function deciding whether a record is included

        Returns:
            Matching records, empty on read errors
        """
        with self.lock:
            try:
                return [record for record in self._load() if predicate(record)]
            except OSError as e:
                logger.error(f"Error reading {self.file_path}: {str(e)}")
                return []

    def find_one(self, predicate: Callable[[Record], bool]) -> Optional[Record]:
        """Return the first record matching a predicate, or None."""
        matches = self.find(predicate)
        return matches[0] if matches else None

    def insert(self, record: Record) -> bool:
        """Append a record.

        Returns:
            bool: True if storage was successful, False otherwise
        """
        with self.lock:
            try:
                records = self._load()
                records.append(record)
                self._dump(records)
                logger.debug(f"Inserted record. Total records: {len(records)}")
                return True
            except (OSError, TypeError, ValueError) as e:
                logger.error(f"Error inserting into {self.file_path}: {str(e)}")
                return False

    def insert_unless(self, predicate: Callable[[Record], bool], record: Record) -> bool:
        """Append a record unless an existing record matches the predicate.

        The check and the write happen under a single lock hold.

        Returns:
            bool: True if the record was stored, False if a match exists or storage failed
        """
        with self.lock:
            try:
                records = self._load()
                if any(predicate(existing) for existing in records):
                    logger.debug(f"Matching record exists in {self.file_path}, not inserting")
                    return False
                records.append(record)
                self._dump(records)
                return True
            except (OSError, TypeError, ValueError) as e:
                logger.error(f"Error inserting into {self.file_path}: {str(e)}")
                return False

    def replace(
        self, predicate: Callable[[Record], bool], record: Record
    ) -> Optional[List[Record]]:
        """Remove all records matching the predicate and append a new one.

        The removal and the append are written together under a single lock hold.

        Returns:
            The removed records, or None if storage failed and nothing changed
        """
        with self.lock:
            try:
                records = self._load()
                removed = [existing for existing in records if predicate(existing)]
                kept = [existing for existing in records if not predicate(existing)]
                kept.append(record)
                self._dump(kept)
                return removed
            except (OSError, TypeError, ValueError) as e:
                logger.error(f"Error replacing in {self.file_path}: {str(e)}")
                return None

    def upsert(self, record: Record, key: str = "uuid") -> bool:
        """Replace the record with the same key value, or append it.

        Returns:
            bool: True if storage was successful, False otherwise
        """
        with self.lock:
            try:
                records = self._load()
                for i, existing in enumerate(records):
                    if existing.get(key) == record.get(key):
                        records[i] = record
                        break
                else:
                    records.append(record)
                self._dump(records)
                return True
            except (OSError, TypeError, ValueError) as e:
                logger.error(f"Error saving into {self.file_path}: {str(e)}")
                return False

    def delete(self, predicate: Callable[[Record], bool]) -> int:
        """Delete all records matching a predicate.

        Returns:
            int: Number of deleted records, 0 on errors
        """
        with self.lock:
            try:
                records = self._load()
                kept = [record for record in records if not predicate(record)]
                deleted = len(records) - len(kept)
                if deleted:
                    self._dump(kept)
                return deleted
            except OSError as e:
                logger.error(f"Error deleting from {self.file_path}: {str(e)}")
                return 0
