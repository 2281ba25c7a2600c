"""
In-memory implementation of the member queries.

The service reads its data source exactly once and keeps the result as
an immutable tuple. Sorting relies on ``sorted`` being stable: members
that compare equal on the sort key keep their snapshot order.

Empty-input conventions:
    * ``average_salary`` and ``avg_name_length_by_house`` return 0.0
    * ``any_salary_greater_than`` returns False
    * ``joined_names_by_house`` returns ""
    * ``highest_salary`` returns None
    * ``stats_by_house`` uses ``SalaryStatistics()`` (count=0, sum=0.0,
      min=+inf, max=-inf, average=0.0)
"""
from operator import attrgetter
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from got_members.config.logging_config import get_logger
from got_members.data.base_repository import BaseRepository
from got_members.data.memory_repository import InMemoryRepository
from got_members.data.models import House, Member, SalaryStatistics, Title
from got_members.utils.error_handling import InvalidArgumentError

from .member_dao import MemberDAO

logger = get_logger(__name__)

NAME_SEPARATOR = ", "

by_id = attrgetter("id")
by_name = attrgetter("name")
by_dob = attrgetter("dob")


def by_house(member: Member) -> int:
    """Sort key placing houses in declaration order."""
    return member.house.ordinal


class MemberQueryService(MemberDAO):
    """Answers member queries over a snapshot taken at construction."""

    def __init__(self, source: BaseRepository[Member]):
        """Take the snapshot from a data source.

        Args:
            source: Data source read once through ``get_all``
        """
        self._members: Tuple[Member, ...] = tuple(source.get_all())
        logger.info(f"Member snapshot loaded from {type(source).__name__}: {len(self._members)} members")

    @classmethod
    def from_members(cls, members: Iterable[Member]) -> 'MemberQueryService':
        """Build a service over the given members."""
        return cls(InMemoryRepository(members))

    def __len__(self) -> int:
        return len(self._members)

    # ── Helpers ───────────────────────────────────────────

    def _where(self, predicate: Callable[[Member], bool]) -> List[Member]:
        return [member for member in self._members if predicate(member)]

    def _in_house(self, house: House) -> List[Member]:
        _require(house, House, "house")
        return self._where(lambda member: member.house is house)

    # ── Lookups ───────────────────────────────────────────

    def find_by_id(self, id: int) -> Optional[Member]:
        return next((member for member in self._members if member.id == id), None)

    def find_by_name(self, name: str) -> Optional[Member]:
        return next((member for member in self._members if member.name == name), None)

    def find_all_by_house(self, house: House) -> List[Member]:
        return self._in_house(house)

    def get_all(self) -> List[Member]:
        return list(self._members)

    # ── Filtered and sorted views ─────────────────────────

    def filter_by_name_prefix_sorted_by_id(self, prefix: str = "S") -> List[Member]:
        return sorted(self._where(lambda member: member.name.startswith(prefix)), key=by_id)

    def filter_by_house_sorted_by_name(self, house: House = House.LANNISTER) -> List[Member]:
        return sorted(self._in_house(house), key=by_name)

    def filter_by_salary_less_than_sorted_by_house(self, max_salary: float) -> List[Member]:
        return sorted(self._where(lambda member: member.salary < max_salary), key=by_house)

    def sort_by_house_then_name(self) -> List[Member]:
        """All members sorted by house, then re-sorted by name.

        The second sort decides the order: members come out by name, and
        only members sharing a name keep their relative house order.
        """
        return sorted(sorted(self._members, key=by_house), key=by_name)

    def sort_house_by_dob(self, house: House) -> List[Member]:
        return sorted(self._in_house(house), key=by_dob)

    def filter_by_title_sorted_by_name_desc(self, title: Title = Title.KING) -> List[Member]:
        _require(title, Title, "title")
        return sorted(self._where(lambda member: member.title is title), key=by_name, reverse=True)

    def names_sorted_by_house(self, house: House) -> List[str]:
        return sorted(member.name for member in self._in_house(house))

    # ── Scalars ───────────────────────────────────────────

    def average_salary(self) -> float:
        return SalaryStatistics.of(member.salary for member in self._members).average

    def any_salary_greater_than(self, threshold: float) -> bool:
        return SalaryStatistics.of(member.salary for member in self._members).max > threshold

    def any_members_in_house(self, house: House) -> bool:
        return bool(self._in_house(house))

    def count_by_house(self, house: House) -> int:
        return len(self._in_house(house))

    def avg_name_length_by_house(self, house: House) -> float:
        lengths = [len(member.name) for member in self._in_house(house)]
        return sum(lengths) / len(lengths) if lengths else 0.0

    def joined_names_by_house(self, house: House) -> str:
        """Names of a house's members in snapshot order, ", "-separated.

        A house without members yields an empty string.
        """
        return NAME_SEPARATOR.join(member.name for member in self._in_house(house))

    def highest_salary(self) -> Optional[Member]:
        return max(self._members, key=attrgetter("salary"), default=None)

    # ── Partitions and groupings ──────────────────────────

    def partition_royalty(self) -> Dict[bool, List[Member]]:
        partition: Dict[bool, List[Member]] = {True: [], False: []}
        for member in self._members:
            partition[member.title.is_royalty].append(member)
        return partition

    def group_by_house(self) -> Dict[House, List[Member]]:
        groups: Dict[House, List[Member]] = {house: [] for house in House}
        for member in self._members:
            groups[member.house].append(member)
        return groups

    def count_by_house_all(self) -> Dict[House, int]:
        return {house: len(members) for house, members in self.group_by_house().items()}

    def stats_by_house(self) -> Dict[House, SalaryStatistics]:
        return {
            house: SalaryStatistics.of(member.salary for member in members)
            for house, members in self.group_by_house().items()
        }


def _require(value, enum_cls, argument: str) -> None:
    """Reject values outside a closed enumeration."""
    if not isinstance(value, enum_cls):
        logger.warning(f"Rejected {argument}={value!r}: not a {enum_cls.__name__}")
        raise InvalidArgumentError(
            f"{argument} must be a {enum_cls.__name__}, got {type(value).__name__}",
            {"argument": argument, "value": repr(value)}
        )
