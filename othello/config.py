"""Engine configuration: search depth, phase thresholds and policy name."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace

ENV_PREFIX = "OTHELLO_"


@dataclass(frozen=True)
class EngineConfig:
    # Plies searched from the root, counting the root move itself.
    search_depth: int = 4
    # Discs on the board at or below which the opening heuristic applies.
    opening_max_discs: int = 15
    # Discs on the board at or below which the midgame heuristic applies.
    midgame_max_discs: int = 40
    strategy: str = "hybrid"

    def __post_init__(self):
        if self.search_depth < 1:
            raise ValueError(f"search_depth must be >= 1, got {self.search_depth}")
        if not 0 <= self.opening_max_discs <= self.midgame_max_discs:
            raise ValueError(
                "phase thresholds must satisfy "
                f"0 <= opening_max_discs ({self.opening_max_discs}) "
                f"<= midgame_max_discs ({self.midgame_max_discs})"
            )

    @classmethod
    def _parse_option(cls, name: str, value: str) -> int | str:
        types = {f.name: f.type for f in fields(cls)}
        if name not in types:
            raise ValueError(f"unknown option: {name!r}")
        if types[name] not in (int, "int"):
            return value
        try:
            return int(value)
        except ValueError:
            raise ValueError(f"option {name} expects an integer, got {value!r}") from None

    def with_option(self, name: str, value: str) -> EngineConfig:
        """Return a copy with option *name* set from its string *value*."""
        return replace(self, **{name: self._parse_option(name, value)})

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> EngineConfig:
        """Build a config from ``OTHELLO_*`` environment variables."""
        environ = os.environ if environ is None else environ
        overrides = {}
        for f in fields(cls):
            value = environ.get(ENV_PREFIX + f.name.upper())
            if value is not None:
                overrides[f.name] = cls._parse_option(f.name, value)
        return cls(**overrides)


DEFAULT_CONFIG = EngineConfig()
