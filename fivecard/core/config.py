# fivecard/core/config.py
from __future__ import annotations
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


@dataclass
class DeckConfig:
    """
    Settings for a :class:`~fivecard.core.deck.Deck`.

    Attributes:
        seed (Optional[int]): Seed for the deck's own RNG when no RNG is injected.
            None draws entropy from the OS.
        lock_timeout (float): Seconds to wait for the deck lock before raising
            DeckLockError. Must be positive.

    Example:
        ```yaml
        seed: 42
        lock_timeout: 2.5
        ```
    """

    seed: Optional[int] = None
    lock_timeout: float = 5.0

    def __post_init__(self) -> None:
        if self.seed is not None:
            self.seed = int(self.seed)
        self.lock_timeout = float(self.lock_timeout)
        if self.lock_timeout <= 0:
            raise ValueError(f"lock_timeout must be positive, got {self.lock_timeout}")

    @classmethod
    def from_dict(cls, cfg: Optional[Dict[str, Any]]) -> "DeckConfig":
        cfg = dict(cfg or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(cfg) - known)
        if unknown:
            raise ValueError(f"Unknown deck config keys: {unknown}")
        return cls(**cfg)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "DeckConfig":
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Deck config in {path} must be a mapping")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_yaml(self, path: Union[str, Path]) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            f.write(yaml.dump(self.to_dict()))
