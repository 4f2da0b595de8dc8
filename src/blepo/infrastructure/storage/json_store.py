"""Watched-state store kept in a JSON file."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from blepo.domain.exceptions import StoreError
from blepo.domain.services.watched_store import WatchedStore

logger = logging.getLogger(__name__)

WATCHED_FILE_NAME = "watched.json"


class JsonWatchedStore(WatchedStore):
    """
    Stores watched video IDs as a sorted JSON array in ``watched.json``.

    The data directory is created on construction. The file is rewritten
    in full on every mark, through a temporary file and a rename.
    """

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir).expanduser()
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreError(f"Cannot create data directory {self.data_dir}: {e}", e) from e
        self.path = self.data_dir / WATCHED_FILE_NAME

    def load_watched(self) -> set[str]:
        if not self.path.exists():
            return set()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StoreError(f"Watched list {self.path} is not valid JSON: {e}", e) from e
        except OSError as e:
            raise StoreError(f"Cannot read watched list {self.path}: {e}", e) from e

        if not isinstance(data, list) or not all(isinstance(item, str) for item in data):
            raise StoreError(f"Watched list {self.path} must be a JSON array of video IDs")
        return set(data)

    def mark_watched(self, video_id: str) -> None:
        watched = self.load_watched()
        if video_id in watched:
            logger.debug("%s already marked watched", video_id)
            return

        watched.add(video_id)
        tmp_path = self.path.with_suffix(".json.tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(sorted(watched), f, indent=2)
                f.write("\n")
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StoreError(f"Cannot write watched list {self.path}: {e}", e) from e

        logger.info("Marked %s as watched", video_id)
