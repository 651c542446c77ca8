# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON file task store.

    The whole collection is read on load() and rewritten on save(); there is
    no incremental append. The file holds a pretty-printed list of records.

    Failure semantics:
    - unparsable content is treated as an empty collection (logged)
    - OSError on read/write is not handled here and reaches the caller
    - no locking: two processes writing the same file lose updates
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.debug("TaskStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _write_records(self, records: list[dict[str, Any]]) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(json.dumps(records, ensure_ascii=False, indent=4), "utf-8")
            os.replace(tmp, self._path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise

    def _decode(self, raw: bytes) -> list[Any]:
        try:
            data = json.loads(raw.decode("utf-8"))
        except ValueError:
            logger.warning("Store %s is not valid UTF-8 JSON; treating it as empty.", self._path)
            return []

        # Files written by older versions can hold an object keyed by position.
        if isinstance(data, dict):
            return list(data.values())
        if isinstance(data, list):
            return data

        logger.warning(
            "Store %s holds %s instead of a list; treating it as empty.",
            self._path,
            type(data).__name__,
        )
        return []

    # ---- public API ----

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("Store %s not found; creating an empty one.", self._path)
            self._write_records([])

        records = self._decode(self._path.read_bytes())

        tasks: list[Task] = []
        for i, record in enumerate(records):
            try:
                tasks.append(Task.from_record(record))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed task record #%d in %s: %s", i, self._path, e)
        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        records = [t.to_record() for t in tasks]
        self._write_records(records)
        logger.debug("Saved %d tasks to %s", len(records), self._path)
