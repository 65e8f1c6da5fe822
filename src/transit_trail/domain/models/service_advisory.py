"""Service advisories and the enums used to filter them."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum


class Priority(IntEnum):
    """How urgent an advisory is. Lower numbers are more urgent."""

    VERY_HIGH = 1
    HIGH = 2
    MEDIUM = 3
    LOW = 4
    VERY_LOW = 5


class Category(Enum):
    """Which vehicles an advisory affects."""

    TRANSIT = "transit"
    HANDI_TRANSIT = "handi-transit"
    ALL = "all"

    @classmethod
    def parse(cls, value: str) -> "Category":
        """Parse a category, ignoring case ("Handi-Transit" and "handi-transit" match)."""
        for category in cls:
            if category.value == value.strip().lower():
                return category
        raise ValueError(f"Unknown advisory category: {value!r}")


@dataclass(frozen=True)
class ServiceAdvisory:
    """A notice about a service disruption or change."""

    key: int
    priority: Priority
    title: str
    body: str
    category: Category
    updated_at: datetime
