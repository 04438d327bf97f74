"""add include_in_projection to profit_centers

Revision ID: 8f04d2b6e913
Revises: 5c1e9a7d3b20
Create Date: 2026-04-11 10:02:55.380117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = "8f04d2b6e913"
down_revision: Union[str, Sequence[str], None] = "5c1e9a7d3b20"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema.

    Nullable de propósito: linhas antigas ficam NULL e o dashboard trata
    NULL como incluído na projeção.
    """
    bind = op.get_bind()
    cols = [c["name"] for c in inspect(bind).get_columns("profit_centers")]
    if "include_in_projection" not in cols:
        op.add_column("profit_centers", sa.Column("include_in_projection", sa.Boolean(), nullable=True))


def downgrade() -> None:
    bind = op.get_bind()
    cols = [c["name"] for c in inspect(bind).get_columns("profit_centers")]
    if "include_in_projection" in cols:
        with op.batch_alter_table("profit_centers") as batch:
            batch.drop_column("include_in_projection")
