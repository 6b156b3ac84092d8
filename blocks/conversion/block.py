# blocks/conversion/block.py
"""
The Block value type.

A Block is one layout unit of a block document: a type name such as
``core/pattern`` or ``universal/element``, an ordered attribute mapping of
JSON-shaped values and an ordered list of child blocks. Whether a block is
serialized self-closing or open/close is derived from ``children`` alone.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

UNIVERSAL_ELEMENT = "universal/element"

# "name" or "namespace/name"; anything else cannot be read back from markup
BLOCK_TYPE_PATTERN = r"[a-zA-Z][\w.-]*(?:/[a-zA-Z][\w.-]*)?"
_BLOCK_TYPE_RE = re.compile(BLOCK_TYPE_PATTERN)


@dataclass
class Block:
    type: str
    attributes: Dict[str, Any] = field(default_factory=dict)
    children: List["Block"] = field(default_factory=list)

    def __post_init__(self):
        if not isinstance(self.type, str) or not self.type:
            raise ValueError("Block type must be a non-empty string")
        if not _BLOCK_TYPE_RE.fullmatch(self.type):
            raise ValueError(f"Invalid block type {self.type!r}")

    @property
    def is_self_closing(self) -> bool:
        return not self.children

    def to_dict(self) -> dict:
        """Return the platform's JSON shape (``name``/``attributes``/``innerBlocks``)."""
        return {
            "name": self.type,
            "attributes": dict(self.attributes),
            "innerBlocks": [child.to_dict() for child in self.children],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Block":
        return cls(
            type=data["name"],
            attributes=dict(data.get("attributes") or {}),
            children=[cls.from_dict(child) for child in data.get("innerBlocks") or []],
        )
