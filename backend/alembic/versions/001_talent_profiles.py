# backend/alembic/versions/001_talent_profiles.py
"""Talent profiles - profiles, location_emails, and the optional PostGIS column

Revision ID: 001_talent_profiles
Revises:
Create Date: 2026-10-19 00:00:00.000000

Creates the searchable roster and the contact-routing table. On PostgreSQL
the PostGIS extension is enabled and ``profiles.geo_location`` plus its GiST
index are added for the spatial radius search; other databases skip them.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001_talent_profiles"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create talent portal schema."""
    print("Creating talent portal schema...")

    bind = op.get_bind()
    dialect_name = bind.dialect.name if bind is not None else "postgresql"
    is_postgres = dialect_name == "postgresql"

    if is_postgres:
        print("Ensuring PostGIS extension...")
        op.execute("CREATE EXTENSION IF NOT EXISTS postgis")

    op.create_table(
        "profiles",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_initial", sa.String(1), nullable=False),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("state", sa.String(2), nullable=False),
        sa.Column("zip_code", sa.String(10), nullable=False),
        sa.Column("professional_summary", sa.Text(), nullable=False, server_default=""),
        sa.Column("office", sa.String(100), nullable=False),
        sa.Column("profession_type", sa.String(100), nullable=False),
        sa.Column("skills", sa.JSON(), nullable=True),
        sa.Column("source_file", sa.String(255), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=True, server_default=sa.func.now()
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), nullable=True, server_default=sa.func.now()
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_profiles_city", "profiles", ["city"])
    op.create_index("ix_profiles_state", "profiles", ["state"])
    op.create_index("ix_profiles_zip_code", "profiles", ["zip_code"])
    op.create_index("ix_profiles_office", "profiles", ["office"])
    op.create_index("ix_profiles_profession_type", "profiles", ["profession_type"])
    op.create_index("idx_profiles_name", "profiles", ["first_name", "last_initial"])

    op.create_table(
        "location_emails",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("location_name", sa.String(100), nullable=False),
        sa.Column("distribution_email", sa.String(255), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=True, server_default=sa.func.now()
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), nullable=True, server_default=sa.func.now()
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("location_name", name="uq_location_emails_location_name"),
    )

    if is_postgres:
        print("Adding geo_location geography column and GiST index...")
        op.execute(
            "ALTER TABLE profiles "
            "ADD COLUMN IF NOT EXISTS geo_location geography(Point, 4326)"
        )
        op.execute(
            "CREATE INDEX IF NOT EXISTS idx_profiles_geo_location "
            "ON profiles USING GIST (geo_location)"
        )

    print("Talent portal schema created")


def downgrade() -> None:
    """Drop talent portal schema."""
    print("Dropping talent portal schema...")

    bind = op.get_bind()
    dialect_name = bind.dialect.name if bind is not None else "postgresql"
    is_postgres = dialect_name == "postgresql"

    if is_postgres:
        op.execute("DROP INDEX IF EXISTS idx_profiles_geo_location")

    op.drop_table("location_emails")

    op.drop_index("idx_profiles_name", table_name="profiles")
    op.drop_index("ix_profiles_profession_type", table_name="profiles")
    op.drop_index("ix_profiles_office", table_name="profiles")
    op.drop_index("ix_profiles_zip_code", table_name="profiles")
    op.drop_index("ix_profiles_state", table_name="profiles")
    op.drop_index("ix_profiles_city", table_name="profiles")
    op.drop_table("profiles")
