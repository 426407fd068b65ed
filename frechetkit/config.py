"""Process-wide settings for the distance and simplification routines."""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass
class Config:
    """Tunable settings: verbosity of progress output and threading hints."""

    verbosity: int = 0
    mp_dynamic: bool = True
    number_threads: int = -1

    def reset(self) -> None:
        """Restore every setting to its default value."""
        for field in fields(self):
            setattr(self, field.name, field.default)


config = Config()