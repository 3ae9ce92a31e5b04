# backend/talent_portal/repositories/spatial_repository.py
"""
PostGIS queries over the unmapped ``profiles.geo_location`` column.

Only meaningful on PostgreSQL with the column created and populated; every
method degrades to "not available" elsewhere.
"""

import logging
from typing import List, Sequence, Tuple

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import RepositoryException

logger = logging.getLogger(__name__)


class SpatialRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def _is_postgres(self) -> bool:
        try:
            bind = self.db.get_bind()
        except SQLAlchemyError:
            return False
        return bind.dialect.name == "postgresql"

    def has_geo_locations(self) -> bool:
        """True when at least one active profile has ``geo_location`` populated."""
        if not self._is_postgres():
            return False

        query = text(
            """
            SELECT 1
            FROM profiles
            WHERE is_active = true
              AND geo_location IS NOT NULL
            LIMIT 1
            """
        )
        try:
            # Savepoint so a missing column does not poison the request transaction
            with self.db.begin_nested():
                row = self.db.execute(query).first()
        except SQLAlchemyError as exc:
            logger.info("Spatial column unavailable: %s", exc)
            return False
        return row is not None

    def ids_within(self, centers: Sequence[Tuple[float, float]], radius_meters: float) -> List[str]:
        """Active profile ids within ``radius_meters`` of any (lat, lng) center."""
        if not centers:
            return []

        params: dict = {"max_distance": radius_meters}
        conditions = []
        for idx, (lat, lng) in enumerate(centers):
            params[f"lat_{idx}"] = lat
            params[f"lng_{idx}"] = lng
            conditions.append(
                f"ST_DWithin(p.geo_location, "
                f"ST_SetSRID(ST_MakePoint(:lng_{idx}, :lat_{idx}), 4326)::geography, :max_distance)"
            )

        query = text(
            f"""
            SELECT p.id
            FROM profiles p
            WHERE p.is_active = true
              AND p.geo_location IS NOT NULL
              AND ({" OR ".join(conditions)})
            """
        )
        try:
            rows = self.db.execute(query, params).fetchall()
        except SQLAlchemyError as exc:
            logger.error("Spatial radius query failed: %s", exc)
            raise RepositoryException(f"Spatial radius query failed: {exc}") from exc
        return [str(row[0]) for row in rows]
