"""
Typed data structures for check files.

A check file pairs recorded call counts with the expectations they
must satisfy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..expectations import Expectation


@dataclass
class CountCheck:
    """A single recorded count and its expectation."""
    id: str
    count: int
    expectation: Expectation
    call: str = ""  # Defaults to the id when omitted in YAML

    @property
    def call_description(self) -> str:
        return self.call or self.id


@dataclass
class CheckSuite:
    """Fully parsed and validated check file."""
    version: int
    name: str
    checks: list[CountCheck] = field(default_factory=list)
