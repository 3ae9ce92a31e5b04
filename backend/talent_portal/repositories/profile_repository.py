# backend/talent_portal/repositories/profile_repository.py
"""
Repository for profile reads (search, metadata) and roster sync writes.

All reads filter on ``is_active``; search reads receive it as part of the
predicate list built by the query builder.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from sqlalchemy import asc, desc, func, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryException
from ..models.profile import Profile
from ..services.search.predicates import Predicate, combine
from .base_repository import BaseRepository

# Fields the roster sync may change after insert
UPDATABLE_FIELDS = frozenset(
    {"professional_summary", "office", "profession_type", "zip_code", "skills", "source_file"}
)


class ProfileRepository(BaseRepository[Profile]):
    def __init__(self, db: Session):
        super().__init__(db, Profile)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------
    def count_matching(self, predicates: Sequence[Predicate]) -> int:
        try:
            return int(
                self.db.query(func.count(Profile.id)).filter(combine(predicates)).scalar() or 0
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error counting profiles: {str(e)}")
            raise RepositoryException(f"Failed to count profiles: {str(e)}")

    def search(
        self,
        predicates: Sequence[Predicate],
        sort_column: str = "first_name",
        descending: bool = False,
        offset: int = 0,
        limit: int = 20,
    ) -> List[Profile]:
        """One page of matching profiles ordered by ``sort_column``."""
        column = getattr(Profile, sort_column)
        order = desc(column) if descending else asc(column)
        try:
            return (
                self.db.query(Profile)
                .filter(combine(predicates))
                .order_by(order)
                .offset(offset)
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error searching profiles: {str(e)}")
            raise RepositoryException(f"Failed to search profiles: {str(e)}")

    def find_candidates(self, predicates: Sequence[Predicate]) -> List[Tuple[str, str]]:
        """(id, zip_code) for every profile matching the pre-filter."""
        try:
            rows = self.db.query(Profile.id, Profile.zip_code).filter(combine(predicates)).all()
        except SQLAlchemyError as e:
            self.logger.error(f"Error loading radius candidates: {str(e)}")
            raise RepositoryException(f"Failed to load radius candidates: {str(e)}")
        return [(str(row[0]), str(row[1] or "")) for row in rows]

    def get_active_by_id(self, profile_id: str) -> Optional[Profile]:
        return self.find_one_by(id=profile_id, is_active=True)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------
    def distinct_profession_types(self) -> List[str]:
        try:
            rows = (
                self.db.query(Profile.profession_type)
                .filter(Profile.is_active.is_(True))
                .distinct()
                .order_by(Profile.profession_type)
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error loading profession types: {str(e)}")
            raise RepositoryException(f"Failed to load profession types: {str(e)}")
        return [row[0] for row in rows if row[0]]

    def distinct_states(self) -> List[str]:
        try:
            rows = (
                self.db.query(Profile.state)
                .filter(Profile.is_active.is_(True))
                .distinct()
                .order_by(Profile.state)
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error loading states: {str(e)}")
            raise RepositoryException(f"Failed to load states: {str(e)}")
        return [row[0] for row in rows if row[0]]

    def distinct_offices(self) -> List[Tuple[str, str, str]]:
        try:
            rows = (
                self.db.query(Profile.office, Profile.city, Profile.state)
                .filter(Profile.is_active.is_(True))
                .distinct()
                .order_by(Profile.office, Profile.city, Profile.state)
                .all()
            )
        except SQLAlchemyError as e:
            self.logger.error(f"Error loading offices: {str(e)}")
            raise RepositoryException(f"Failed to load offices: {str(e)}")
        return [(row[0], row[1], row[2]) for row in rows]

    # ------------------------------------------------------------------
    # Roster sync writes
    # ------------------------------------------------------------------
    def insert_profiles(self, profiles: List[Dict[str, Any]]) -> List[Profile]:
        """Insert new active profiles. Does not commit."""
        rows = [{**data, "is_active": True} for data in profiles]
        if not rows:
            return []
        return self.bulk_create(rows)

    def update_profile(self, profile_id: str, **fields: Any) -> bool:
        """
        Update the sync-managed fields of one profile.

        Fields outside UPDATABLE_FIELDS are ignored. Returns False when the
        profile does not exist or nothing changed.
        """
        changes = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
        ignored = set(fields) - set(changes)
        if ignored:
            self.logger.debug("Ignoring non-updatable profile fields: %s", sorted(ignored))
        if not changes:
            return False

        profile = self.get_by_id(profile_id)
        if profile is None:
            return False
        try:
            for key, value in changes.items():
                setattr(profile, key, value)
            self.db.flush()
            return True
        except SQLAlchemyError as e:
            self.logger.error(f"Error updating profile {profile_id}: {str(e)}")
            self.db.rollback()
            raise RepositoryException(f"Failed to update profile: {str(e)}")

    def soft_delete_profiles(self, profile_ids: Iterable[str]) -> int:
        """Mark profiles inactive; returns the number of rows changed."""
        ids = [pid for pid in profile_ids if pid]
        if not ids:
            return 0
        try:
            result = self.db.execute(
                update(Profile)
                .where(Profile.id.in_(ids), Profile.is_active.is_(True))
                .values(is_active=False)
                .execution_options(synchronize_session="fetch")
            )
            self.db.flush()
            return int(result.rowcount or 0)
        except SQLAlchemyError as e:
            self.logger.error(f"Error soft-deleting profiles: {str(e)}")
            self.db.rollback()
            raise RepositoryException(f"Failed to delete profiles: {str(e)}")
