"""
User Store - Persists users and their linked GitHub credentials.

Two backends:
- memory: process-local dict, for development and tests
- json: a single JSON file on disk
"""

import json
import logging
import threading
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from repodoc.models.schemas import UserRecord

logger = logging.getLogger(__name__)


@dataclass
class UserStoreConfig:
    """Configuration for the user store."""
    backend: str = "memory"  # memory or json
    path: str = "./data/users.json"


class UserStore:
    """
    Keyed storage for ``UserRecord`` objects.

    Records are looked up by internal id (the session token subject) or by
    the stable GitHub account id used when linking.
    """

    def __init__(self, config: Optional[UserStoreConfig] = None):
        self.config = config or UserStoreConfig()
        if self.config.backend not in ("memory", "json"):
            raise ValueError(f"Unknown user store backend: {self.config.backend}")

        self._lock = threading.RLock()
        self._users: Dict[str, UserRecord] = {}
        self._path = Path(self.config.path)

        if self.config.backend == "json":
            self._load()

    def get(self, user_id: str) -> Optional[UserRecord]:
        with self._lock:
            return self._users.get(user_id)

    def find_by_github_id(self, github_id: str) -> Optional[UserRecord]:
        with self._lock:
            users = list(self._users.values())
        for user in users:
            if user.github_id == github_id:
                return user
        return None

    def save(self, user: UserRecord) -> UserRecord:
        """Insert or replace ``user``."""
        with self._lock:
            self._users[user.id] = user
            if self.config.backend == "json":
                self._flush()
        return user

    def upsert_github_user(
        self,
        github_id: str,
        github_username: str,
        access_token: str,
        email: str = "",
    ) -> UserRecord:
        """
        Create or refresh the user linked to ``github_id``.

        An existing record keeps its id and email; token and username are
        replaced.
        """
        with self._lock:
            existing = self.find_by_github_id(github_id)
            if existing is None:
                user = UserRecord(
                    id=uuid.uuid4().hex,
                    email=email,
                    github_id=github_id,
                    github_username=github_username,
                    github_access_token=access_token,
                )
            else:
                user = existing.model_copy(update={
                    "github_username": github_username,
                    "github_access_token": access_token,
                })
            return self.save(user)

    def _load(self) -> None:
        if not self._path.exists():
            return
        raw = json.loads(self._path.read_text(encoding="utf-8"))
        self._users = {
            user_id: UserRecord.model_validate(data)
            for user_id, data in raw.items()
        }
        logger.info(f"Loaded {len(self._users)} users from {self._path}")

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(
            json.dumps(
                {user_id: user.model_dump() for user_id, user in self._users.items()},
                indent=2,
            ),
            encoding="utf-8",
        )
        tmp.replace(self._path)
