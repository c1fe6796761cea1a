"""Create countries and hotels tables

Revision ID: 001
Revises: None
Create Date: 2021-11-14 00:00:00.000000+00:00

What:  Creates `countries` and `hotels` and inserts the reference rows
       (three countries, three hotels).

Rollback: downgrade() drops both tables.
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    countries = op.create_table(
        "countries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("short_code", sa.String(2), nullable=False),
        sa.Column("long_code", sa.String(3), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    hotels = op.create_table(
        "hotels",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("address", sa.String(250), nullable=False),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.Column("country_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["country_id"], ["countries.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )

    # Hotel lookups by country (detail view, cascade delete)
    op.create_index("idx_hotels_country_id", "hotels", ["country_id"])

    op.bulk_insert(
        countries,
        [
            {"id": 1, "name": "Jamaica", "short_code": "JM"},
            {"id": 2, "name": "Bahamas", "short_code": "BS"},
            {"id": 3, "name": "Cayman Island", "short_code": "CI"},
        ],
    )
    op.bulk_insert(
        hotels,
        [
            {"id": 1, "name": "Sandals Resort and Spa", "address": "Negril", "rating": 4.5, "country_id": 1},
            {"id": 2, "name": "Comfort Suites", "address": "George Town", "rating": 4.3, "country_id": 3},
            {"id": 3, "name": "Grand Palldium", "address": "Nassua", "rating": 4.0, "country_id": 2},
        ],
    )

    # Explicit ids above leave PostgreSQL sequences at 1
    if op.get_bind().dialect.name == "postgresql":
        op.execute("SELECT setval('countries_id_seq', (SELECT MAX(id) FROM countries))")
        op.execute("SELECT setval('hotels_id_seq', (SELECT MAX(id) FROM hotels))")


def downgrade() -> None:
    """Drops hotels before countries; all catalog data is lost."""
    op.drop_index("idx_hotels_country_id", table_name="hotels")
    op.drop_table("hotels")
    op.drop_table("countries")
