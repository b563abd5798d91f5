"""
Log sources — the hierarchical name/key path of a logger node.

A source grows by one segment per ``named()`` call and never shrinks.
Sources are values: ``child()`` returns a new source and leaves the
parent untouched.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple, Union

Key = Union[str, int]


class SourceName(NamedTuple):
    """One path segment: a name and an optional key (e.g. an id)."""
    name: str
    key: Optional[Key] = None

    def __str__(self) -> str:
        return self.name if self.key is None else f"{self.name}#{self.key}"


@dataclass(frozen=True)
class LogSource:
    """Ordered path from the root logger to a node."""
    names: Tuple[SourceName, ...] = ()

    def child(self, name: str, key: Optional[Key] = None) -> 'LogSource':
        return LogSource(self.names + (SourceName(name, key),))

    @property
    def depth(self) -> int:
        return len(self.names)

    def __str__(self) -> str:
        return ' '.join(str(n) for n in self.names)


ROOT = LogSource()
