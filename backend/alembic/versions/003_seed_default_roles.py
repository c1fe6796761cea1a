"""Seed the default roles

Revision ID: 003
Revises: 002
Create Date: 2021-11-21 19:23:45.000000+00:00

What:  Inserts the two fixed roles, User and Administrator, with hard-coded
       identifiers and concurrency stamps so every environment agrees on them.

Rollback: downgrade() deletes exactly these two rows by id.
"""

from typing import Sequence, Union
import uuid

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# Kept literal: migrations must not change when the models do
ROLES = [
    {
        "id": uuid.UUID("63a24af8-4baf-44b2-aa62-1d3ad1c40db0"),
        "name": "User",
        "normalized_name": "USER",
        "concurrency_stamp": "727a3329-01f1-4820-b0b0-740d443e0ca6",
    },
    {
        "id": uuid.UUID("b2ebb26f-9921-4a94-ac56-29ab2744f2d2"),
        "name": "Administrator",
        "normalized_name": "ADMINISTRATOR",
        "concurrency_stamp": "07d2921d-a241-45db-992a-75f1186fa3b0",
    },
]

roles_table = sa.table(
    "roles",
    sa.column("id", sa.Uuid()),
    sa.column("name", sa.String),
    sa.column("normalized_name", sa.String),
    sa.column("concurrency_stamp", sa.String),
)


def upgrade() -> None:
    op.bulk_insert(roles_table, ROLES)


def downgrade() -> None:
    op.execute(
        roles_table.delete().where(roles_table.c.id.in_([role["id"] for role in ROLES]))
    )
