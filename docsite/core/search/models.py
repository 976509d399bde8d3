import json
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Optional

# Fields eligible for substring matching in local mode, in match order.
SEARCHABLE_FIELDS = (
    "title",
    "params_inline",
    "category",
    "parent",
    "description",
    "headings",
)


class SearchState(Enum):
    IDLE = "idle"
    SEARCHED = "searched"


def _as_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _as_headings(value: Any) -> List[str]:
    """
    Headings arrive as a list (remote hits), a JSON encoded list (store rows)
    or a plain newline separated string (hand-written seed files).
    """
    if value is None or value == "":
        return []
    if isinstance(value, (list, tuple)):
        return [str(h) for h in value if h is not None]
    if isinstance(value, str):
        if value.lstrip().startswith("["):
            try:
                decoded = json.loads(value)
            except ValueError:
                decoded = None
            if isinstance(decoded, list):
                return [str(h) for h in decoded if h is not None]
        return [line for line in value.splitlines() if line.strip()]
    return [str(value)]


@dataclass
class SearchableDocument:
    """
    Canonical unit of a hit list, whichever backend produced it.
    """
    slug: str
    title: Optional[str] = None
    category: Optional[str] = None
    parent: Optional[str] = None
    description: Optional[str] = None
    headings: List[str] = field(default_factory=list)
    params_inline: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "SearchableDocument":
        """
        Maps a plain record (remote hit or store row) to a document.
        Unknown keys are ignored, missing ones become None.
        """
        slug = record.get("slug") or record.get("id") or ""
        return cls(
            slug=str(slug),
            title=_as_optional_str(record.get("title")),
            category=_as_optional_str(record.get("category")),
            parent=_as_optional_str(record.get("parent")),
            description=_as_optional_str(record.get("description")),
            headings=_as_headings(record.get("headings")),
            params_inline=_as_optional_str(record.get("params_inline")),
        )

    def to_record(self) -> Dict[str, Any]:
        return asdict(self)

    def field_values(self, name: str) -> List[str]:
        value = getattr(self, name, None)
        if value is None:
            return []
        if isinstance(value, list):
            return value
        return [value]

    def matches(self, needle: str, fields=SEARCHABLE_FIELDS) -> bool:
        """Case-insensitive substring match against any of `fields`."""
        folded = needle.casefold()
        for name in fields:
            for value in self.field_values(name):
                if folded in value.casefold():
                    return True
        return False
