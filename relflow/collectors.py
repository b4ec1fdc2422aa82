"""Collector references run as part of the release workflow."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List

NAME_PATTERN = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")


@dataclass
class Param:
    """A named parameter passed to a collector."""

    name: str
    value: str


@dataclass
class Collector:
    """A reference to a collector to execute, with its parameters."""

    name: str
    type: str
    params: List[Param] = field(default_factory=list)
    timeout: int = 0

    def validate(self) -> "Collector":
        """Check the name and type against the allowed pattern; return self."""
        for label, value in (("name", self.name), ("type", self.type)):
            if not NAME_PATTERN.fullmatch(value):
                raise ValueError(f"collector {label} {value!r} does not match {NAME_PATTERN.pattern}")
        return self