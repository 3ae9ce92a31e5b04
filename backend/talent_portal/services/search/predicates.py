"""
Filter predicates for profile search.

Each predicate is an immutable value holding its own bound parameters and
renders one SQLAlchemy boolean clause. The query builder collects them into a
list; ``combine`` ANDs the list so count and fetch share identical filters.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from sqlalchemy import and_, or_
from sqlalchemy.sql.elements import ColumnElement

from ...models.profile import Profile

# Columns a free-text keyword is matched against
KEYWORD_COLUMNS = (
    Profile.professional_summary,
    Profile.first_name,
    Profile.last_initial,
    Profile.city,
)


class Predicate(ABC):
    @abstractmethod
    def clause(self) -> ColumnElement[bool]:
        pass


@dataclass(frozen=True)
class ActivePredicate(Predicate):
    def clause(self) -> ColumnElement[bool]:
        return Profile.is_active.is_(True)


@dataclass(frozen=True)
class KeywordPredicate(Predicate):
    """Any keyword matching any of the keyword columns (case-insensitive)."""

    keywords: Tuple[str, ...]

    def clause(self) -> ColumnElement[bool]:
        return or_(
            *[
                column.icontains(keyword, autoescape=True)
                for keyword in self.keywords
                for column in KEYWORD_COLUMNS
            ]
        )


@dataclass(frozen=True)
class ProfessionPredicate(Predicate):
    professions: Tuple[str, ...]

    def clause(self) -> ColumnElement[bool]:
        return or_(
            *[
                Profile.profession_type.icontains(profession, autoescape=True)
                for profession in self.professions
            ]
        )


@dataclass(frozen=True)
class ZipInPredicate(Predicate):
    zip_codes: Tuple[str, ...]

    def clause(self) -> ColumnElement[bool]:
        return Profile.zip_code.in_(list(self.zip_codes))


@dataclass(frozen=True)
class ZipEqualsPredicate(Predicate):
    zip_code: str

    def clause(self) -> ColumnElement[bool]:
        return Profile.zip_code == self.zip_code


@dataclass(frozen=True)
class CityContainsPredicate(Predicate):
    city: str

    def clause(self) -> ColumnElement[bool]:
        return Profile.city.icontains(self.city, autoescape=True)


@dataclass(frozen=True)
class StateEqualsPredicate(Predicate):
    state: str

    def clause(self) -> ColumnElement[bool]:
        return Profile.state == self.state.upper()


@dataclass(frozen=True)
class OfficeEqualsPredicate(Predicate):
    office: str

    def clause(self) -> ColumnElement[bool]:
        return Profile.office == self.office


@dataclass(frozen=True)
class IdInPredicate(Predicate):
    ids: Tuple[str, ...]

    def clause(self) -> ColumnElement[bool]:
        return Profile.id.in_(list(self.ids))


def keyword_predicate(keywords: Iterable[str]) -> Optional[KeywordPredicate]:
    cleaned = tuple(k.strip() for k in keywords if k and k.strip())
    return KeywordPredicate(cleaned) if cleaned else None


def profession_predicate(professions: Iterable[str]) -> Optional[ProfessionPredicate]:
    cleaned = tuple(p.strip() for p in professions if p and p.strip())
    return ProfessionPredicate(cleaned) if cleaned else None


def combine(predicates: Sequence[Predicate]) -> ColumnElement[bool]:
    return and_(*[predicate.clause() for predicate in predicates])
