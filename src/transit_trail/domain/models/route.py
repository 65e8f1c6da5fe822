"""Route, variant and bus domain models."""

from dataclasses import dataclass
from enum import Enum


class Coverage(Enum):
    """How fully a route services the stops along its segments."""

    REGULAR = "regular"
    EXPRESS = "express"
    SUPER_EXPRESS = "super express"
    RAPID_TRANSIT = "rapid transit"
    FEEDER = "feeder"
    PEAK_FEEDER = "peak feeder"


class Customer(Enum):
    """The type of service provided by a route."""

    REGULAR = "regular"
    INDUSTRIAL = "industrial"
    SCHOOL = "school"
    CHARTER = "charter"
    WORK = "work"


@dataclass(frozen=True)
class Variant:
    """A variation of a route, distinguished by its intermediate destinations."""

    key: str
    name: str | None = None


@dataclass(frozen=True)
class Bus:
    """The bus servicing a ride. Usually only present for today's plans."""

    key: int
    bike_rack: bool
    wifi: bool


@dataclass(frozen=True)
class BadgeStyle:
    """CSS styling for a route badge."""

    class_names: tuple[str, ...]
    background_color: str
    border_color: str
    color: str


@dataclass(frozen=True)
class RegularRoute:
    """Any route that is not a BLUE rapid transit line. Keys are numeric."""

    key: int
    number: int
    badge_label: int
    name: str | None = None
    customer_type: Customer = Customer.REGULAR
    coverage: Coverage = Coverage.REGULAR
    badge_style: BadgeStyle | None = None
    variants: tuple[Variant, ...] | None = None


@dataclass(frozen=True)
class BlueRoute:
    """A BLUE rapid transit line. Keys, numbers and badge labels are strings."""

    key: str
    number: str
    badge_label: str
    name: str | None = None
    customer_type: Customer = Customer.REGULAR
    coverage: Coverage = Coverage.RAPID_TRANSIT
    badge_style: BadgeStyle | None = None
    variants: tuple[Variant, ...] | None = None


Route = RegularRoute | BlueRoute
