"""
The canonical member dataset.

Callers build a repository with ``create_member_db()`` and pass it to
whatever needs it; nothing here is shared module state.
"""
from datetime import date
from typing import List

from .memory_repository import InMemoryRepository
from .models import House, Member, Title


def default_members() -> List[Member]:
    """Return a fresh list of the canonical members."""
    return [
        Member(1, "Eddard", House.STARK, Title.LORD, date(1959, 4, 17), 100000.0),
        Member(2, "Catelyn", House.STARK, Title.LADY, date(1964, 1, 17), 80000.0),
        Member(3, "Arya", House.STARK, Title.LADY, date(1997, 4, 15), 50000.0),
        Member(4, "Sansa", House.STARK, Title.LADY, date(1996, 2, 21), 60000.0),
        Member(5, "Bran", House.STARK, Title.SIR, date(1999, 4, 9), 10000.0),
        Member(6, "Robb", House.STARK, Title.KING, date(1986, 6, 18), 100000.0),
        Member(7, "Jon", House.SNOW, Title.KING, date(1986, 12, 26), 90000.0),
        Member(8, "Jaime", House.LANNISTER, Title.SIR, date(1970, 7, 27), 120000.0),
        Member(9, "Tyrion", House.LANNISTER, Title.LORD, date(1969, 6, 11), 70000.0),
        Member(10, "Tywin", House.LANNISTER, Title.LORD, date(1946, 10, 10), 200000.0),
        Member(11, "Cersei", House.LANNISTER, Title.QUEEN, date(1973, 10, 3), 120000.0),
        Member(12, "Daenerys", House.TARGARYEN, Title.QUEEN, date(1987, 5, 1), 130000.0),
        Member(13, "Viserys", House.TARGARYEN, Title.LORD, date(1983, 11, 17), 100000.0),
        Member(14, "Robert", House.BARATHEON, Title.KING, date(1964, 1, 14), 180000.0),
        Member(15, "Joffrey", House.BARATHEON, Title.KING, date(1992, 5, 20), 100000.0),
        Member(16, "Tommen", House.BARATHEON, Title.KING, date(1997, 9, 7), 60000.0),
        Member(17, "Stannis", House.BARATHEON, Title.LORD, date(1957, 3, 27), 123456.0),
        Member(18, "Margaery", House.TYRELL, Title.QUEEN, date(1982, 2, 11), 80000.0),
        Member(19, "Loras", House.TYRELL, Title.SIR, date(1988, 3, 24), 70000.0),
        Member(20, "Olenna", House.TYRELL, Title.LADY, date(1938, 7, 20), 130000.0),
        Member(21, "Roose", House.BOLTON, Title.LORD, date(1963, 9, 12), 100000.0),
        Member(22, "Ramsay", House.BOLTON, Title.SIR, date(1985, 5, 13), 140000.0),
    ]


def create_member_db() -> InMemoryRepository[Member]:
    """Build a repository over the canonical members."""
    return InMemoryRepository(default_members())
