"""Shared type aliases used across docstore."""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

# Config value types
ConfigDict = dict[str, Any]

# Path types
PathLike = str | Path

# Store plumbing
IdFactory = Callable[[], str]
Clock = Callable[[], datetime]
