"""
Query interface over a snapshot of members.
"""
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from got_members.data.models import House, Member, SalaryStatistics, Title


class MemberDAO(ABC):
    """Read-only queries over a fixed collection of members.

    Every query is a pure function of the snapshot and its arguments.
    Lookups signal absence with None; per-house maps always carry one
    entry for every House, in declaration order.
    """

    # ── Lookups ───────────────────────────────────────────

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[Member]:
        """Member with the given id, or None."""

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Member]:
        """Some member with the given name, or None."""

    @abstractmethod
    def find_all_by_house(self, house: House) -> List[Member]:
        """Members of a house in snapshot order."""

    @abstractmethod
    def get_all(self) -> List[Member]:
        """A new list holding the whole snapshot."""

    # ── Filtered and sorted views ─────────────────────────

    @abstractmethod
    def filter_by_name_prefix_sorted_by_id(self, prefix: str = "S") -> List[Member]:
        """Members whose name starts with prefix, by ascending id."""

    @abstractmethod
    def filter_by_house_sorted_by_name(self, house: House = House.LANNISTER) -> List[Member]:
        """Members of a house by ascending name."""

    @abstractmethod
    def filter_by_salary_less_than_sorted_by_house(self, max_salary: float) -> List[Member]:
        """Members earning less than max_salary, by house declaration order."""

    @abstractmethod
    def sort_by_house_then_name(self) -> List[Member]:
        """All members sorted by house, then re-sorted by name."""

    @abstractmethod
    def sort_house_by_dob(self, house: House) -> List[Member]:
        """Members of a house by ascending birthdate."""

    @abstractmethod
    def filter_by_title_sorted_by_name_desc(self, title: Title = Title.KING) -> List[Member]:
        """Members holding a title by descending name."""

    @abstractmethod
    def names_sorted_by_house(self, house: House) -> List[str]:
        """Names of a house's members in ascending order."""

    # ── Scalars ───────────────────────────────────────────

    @abstractmethod
    def average_salary(self) -> float:
        """Mean salary over the snapshot."""

    @abstractmethod
    def any_salary_greater_than(self, threshold: float) -> bool:
        """Whether the highest salary exceeds threshold."""

    @abstractmethod
    def any_members_in_house(self, house: House) -> bool:
        """Whether the house has at least one member."""

    @abstractmethod
    def count_by_house(self, house: House) -> int:
        """Number of members in a house."""

    @abstractmethod
    def avg_name_length_by_house(self, house: House) -> float:
        """Mean name length of a house's members."""

    @abstractmethod
    def joined_names_by_house(self, house: House) -> str:
        """Names of a house's members joined with ', '."""

    @abstractmethod
    def highest_salary(self) -> Optional[Member]:
        """Member with the highest salary, or None."""

    # ── Partitions and groupings ──────────────────────────

    @abstractmethod
    def partition_royalty(self) -> Dict[bool, List[Member]]:
        """Split members into royalty (True) and everyone else (False)."""

    @abstractmethod
    def group_by_house(self) -> Dict[House, List[Member]]:
        """Members of every house."""

    @abstractmethod
    def count_by_house_all(self) -> Dict[House, int]:
        """Member count of every house."""

    @abstractmethod
    def stats_by_house(self) -> Dict[House, SalaryStatistics]:
        """Salary statistics of every house."""
