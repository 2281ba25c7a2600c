"""
Data models for members, houses, titles and salary statistics.
"""
import math
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Iterable

from got_members.utils.error_handling import InvalidArgumentError


class House(Enum):
    """Noble houses. Declaration order is the sort order."""

    ARRYN = "Arryn"
    BARATHEON = "Baratheon"
    BOLTON = "Bolton"
    FREY = "Frey"
    GREYJOY = "Greyjoy"
    LANNISTER = "Lannister"
    MARTELL = "Martell"
    MORMONT = "Mormont"
    SNOW = "Snow"
    STARK = "Stark"
    TARGARYEN = "Targaryen"
    TULLY = "Tully"
    TYRELL = "Tyrell"

    @property
    def ordinal(self) -> int:
        """Position of this house in declaration order."""
        return _HOUSE_ORDER[self]

    @classmethod
    def from_string(cls, name: str) -> 'House':
        """Convert a member name or display value to a House."""
        return _enum_from_string(cls, name)


_HOUSE_ORDER = {house: index for index, house in enumerate(House)}


class Title(Enum):
    """Ranks a member can hold."""

    SIR = "Sir"
    LORD = "Lord"
    LADY = "Lady"
    PRINCE = "Prince"
    PRINCESS = "Princess"
    KING = "King"
    QUEEN = "Queen"

    @property
    def is_royalty(self) -> bool:
        """Kings and queens only."""
        return self in ROYAL_TITLES

    @classmethod
    def from_string(cls, name: str) -> 'Title':
        """Convert a member name or display value to a Title."""
        return _enum_from_string(cls, name)


ROYAL_TITLES = frozenset({Title.KING, Title.QUEEN})


def _enum_from_string(enum_cls, name: str):
    for item in enum_cls:
        if name in (item.name, item.value):
            return item
    raise InvalidArgumentError(
        f"Unknown {enum_cls.__name__}: {name!r}",
        {"allowed": [item.name for item in enum_cls]}
    )


@dataclass(frozen=True)
class Member:
    """Model representing a member of a noble house."""

    id: int
    name: str
    house: House
    title: Title
    dob: date
    salary: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert the model to a dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "house": self.house.name,
            "title": self.title.name,
            "dob": self.dob.isoformat(),
            "salary": self.salary
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Member':
        """Create a model from a dictionary."""
        dob = date.fromisoformat(data["dob"]) if isinstance(data["dob"], str) else data["dob"]
        house = data["house"] if isinstance(data["house"], House) else House.from_string(data["house"])
        title = data["title"] if isinstance(data["title"], Title) else Title.from_string(data["title"])

        return cls(
            id=int(data["id"]),
            name=data["name"],
            house=house,
            title=title,
            dob=dob,
            salary=float(data["salary"])
        )


@dataclass(frozen=True)
class SalaryStatistics:
    """Summary of a set of salaries.

    An empty set has count=0, sum=0.0, min=+inf, max=-inf and average 0.0.
    """

    count: int = 0
    sum: float = 0.0
    min: float = math.inf
    max: float = -math.inf

    @property
    def average(self) -> float:
        """Mean salary, 0.0 when there are no salaries."""
        return self.sum / self.count if self.count else 0.0

    @classmethod
    def of(cls, values: Iterable[float]) -> 'SalaryStatistics':
        """Summarize an iterable of salaries in a single pass."""
        count, total = 0, 0.0
        low, high = math.inf, -math.inf
        for value in values:
            count += 1
            total += value
            low = min(low, value)
            high = max(high, value)
        return cls(count=count, sum=total, min=low, max=high)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the statistics to a dictionary."""
        return {
            "count": self.count,
            "sum": self.sum,
            "min": self.min,
            "max": self.max,
            "average": self.average
        }
