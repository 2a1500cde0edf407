"""Configuration for the in-memory document store.

A pure data container with sensible defaults. Build it directly, or from
the layered ``docstore.core.config.Config`` with ``StoreConfig.from_config``.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime

from docstore.core.config import Config
from docstore.core.types import Clock, IdFactory


def _uuid4_id() -> str:
    return str(uuid.uuid4())


@dataclass
class StoreConfig:
    """Settings for id generation and timestamping.

    Attributes:
        utc_timestamps: Stamp new documents with timezone-aware UTC times.
            When False, naive local times are used instead.
        id_factory: Produces identifiers for documents saved without one.
        clock: Overrides the timestamp source entirely (handy in tests).
    """

    utc_timestamps: bool = True
    id_factory: IdFactory = field(default=_uuid4_id)
    clock: Clock | None = None

    def now(self) -> datetime:
        if self.clock is not None:
            return self.clock()
        if self.utc_timestamps:
            return datetime.now(UTC)
        return datetime.now()

    @classmethod
    def from_config(cls, config: Config) -> StoreConfig:
        """Read the ``store.*`` section of *config*.

        Raises:
            ConfigurationError: If a value cannot be interpreted.
        """
        return cls(utc_timestamps=config.get_bool("store.utc_timestamps", True))
