"""initial schema

Revision ID: 5c1e9a7d3b20
Revises:
Create Date: 2026-03-02 19:41:07.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5c1e9a7d3b20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.String(36), primary_key=True)


def _ts(name: str, nullable: bool = True) -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=nullable)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "holding_accounts",
        _id(),
        sa.Column("name", sa.String(200), nullable=False),
        _ts("created_at"),
        _ts("updated_at"),
    )

    op.create_table(
        "companies",
        _id(),
        sa.Column("holding_account_id", sa.String(36), sa.ForeignKey("holding_accounts.id"), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("color", sa.String(16), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=True),
        _ts("created_at"),
        _ts("updated_at"),
    )
    op.create_index("ix_companies_holding_account_id", "companies", ["holding_account_id"])

    op.create_table(
        "profit_centers",
        _id(),
        sa.Column("holding_account_id", sa.String(36), sa.ForeignKey("holding_accounts.id"), nullable=False),
        sa.Column("company_id", sa.String(36), sa.ForeignKey("companies.id"), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=True),
        _ts("created_at"),
        _ts("updated_at"),
    )
    op.create_index("ix_profit_centers_holding_account_id", "profit_centers", ["holding_account_id"])
    op.create_index("ix_profit_centers_company_id", "profit_centers", ["company_id"])

    op.create_table(
        "normalized_transactions",
        _id(),
        sa.Column("holding_account_id", sa.String(36), sa.ForeignKey("holding_accounts.id"), nullable=False),
        sa.Column("profit_center_id", sa.String(36), sa.ForeignKey("profit_centers.id"), nullable=False),
        sa.Column("company_id", sa.String(36), sa.ForeignKey("companies.id"), nullable=False),
        sa.Column("txn_date", sa.String(10), nullable=False),
        sa.Column("amount_cents", sa.Integer(), nullable=False),
        sa.Column("currency", sa.String(3), nullable=False),
        sa.Column("is_projected", sa.Boolean(), nullable=False),
        sa.Column("provider", sa.String(32), nullable=False),
        sa.Column("external_id", sa.String(200), nullable=True),
        sa.Column("raw_event_id", sa.String(200), nullable=True),
        sa.Column("description", sa.String(500), nullable=False),
        _ts("created_at"),
        _ts("updated_at"),
    )
    op.create_index("ix_normalized_transactions_holding_account_id", "normalized_transactions", ["holding_account_id"])
    op.create_index("ix_normalized_transactions_profit_center_id", "normalized_transactions", ["profit_center_id"])
    op.create_index("ix_normalized_transactions_company_id", "normalized_transactions", ["company_id"])
    op.create_index("ix_normalized_transactions_txn_date", "normalized_transactions", ["txn_date"])

    op.create_table(
        "note_entries",
        _id(),
        sa.Column("profit_center_id", sa.String(36), sa.ForeignKey("profit_centers.id"), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("created_by", sa.String(200), nullable=False),
        _ts("created_at"),
    )
    op.create_index("ix_note_entries_profit_center_id", "note_entries", ["profit_center_id"])

    op.create_table(
        "overhead_items",
        _id(),
        sa.Column("profit_center_id", sa.String(36), sa.ForeignKey("profit_centers.id"), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("amount_cents", sa.Integer(), nullable=False),
        sa.Column("frequency", sa.String(16), nullable=False),
        sa.Column("note", sa.String(500), nullable=False),
        _ts("created_at"),
        _ts("updated_at"),
    )
    op.create_index("ix_overhead_items_profit_center_id", "overhead_items", ["profit_center_id"])

    op.create_table(
        "financial_connections",
        _id(),
        sa.Column("holding_account_id", sa.String(36), sa.ForeignKey("holding_accounts.id"), nullable=False),
        sa.Column("provider", sa.String(32), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("external_account_id", sa.String(200), nullable=True),
        sa.Column("metadata", sa.JSON(), nullable=False),
        _ts("last_synced_at"),
        _ts("created_at"),
    )
    op.create_index("ix_financial_connections_holding_account_id", "financial_connections", ["holding_account_id"])

    op.create_table(
        "mapping_rules",
        _id(),
        sa.Column("holding_account_id", sa.String(36), sa.ForeignKey("holding_accounts.id"), nullable=False),
        sa.Column("provider", sa.String(32), nullable=False),
        sa.Column("match_type", sa.String(16), nullable=False),
        sa.Column("match_value", sa.String(200), nullable=False),
        sa.Column("profit_center_id", sa.String(36), sa.ForeignKey("profit_centers.id"), nullable=False),
        sa.Column("priority", sa.Integer(), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
        _ts("created_at"),
    )
    op.create_index("ix_mapping_rules_holding_account_id", "mapping_rules", ["holding_account_id"])

    op.create_table(
        "kanban_columns",
        _id(),
        sa.Column("holding_account_id", sa.String(36), sa.ForeignKey("holding_accounts.id"), nullable=False),
        sa.Column("title", sa.String(120), nullable=False),
        sa.Column("color", sa.String(16), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False),
        _ts("created_at"),
        _ts("updated_at"),
    )
    op.create_index("ix_kanban_columns_holding_account_id", "kanban_columns", ["holding_account_id"])

    op.create_table(
        "kanban_cards",
        _id(),
        sa.Column("holding_account_id", sa.String(36), sa.ForeignKey("holding_accounts.id"), nullable=False),
        sa.Column("column_id", sa.String(36), sa.ForeignKey("kanban_columns.id"), nullable=False),
        sa.Column("profit_center_id", sa.String(36), sa.ForeignKey("profit_centers.id"), nullable=True),
        sa.Column("company_id", sa.String(36), sa.ForeignKey("companies.id"), nullable=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("amount_cents", sa.Integer(), nullable=True),
        sa.Column("due_date", sa.String(10), nullable=True),
        sa.Column("priority", sa.String(8), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False),
        _ts("completed_at"),
        _ts("created_at"),
        _ts("updated_at"),
    )
    op.create_index("ix_kanban_cards_holding_account_id", "kanban_cards", ["holding_account_id"])
    op.create_index("ix_kanban_cards_column_id", "kanban_cards", ["column_id"])
    op.create_index("ix_kanban_cards_profit_center_id", "kanban_cards", ["profit_center_id"])
    op.create_index("ix_kanban_cards_company_id", "kanban_cards", ["company_id"])

    op.create_table(
        "rocks",
        _id(),
        sa.Column("holding_account_id", sa.String(36), sa.ForeignKey("holding_accounts.id"), nullable=False),
        sa.Column("profit_center_id", sa.String(36), sa.ForeignKey("profit_centers.id"), nullable=True),
        sa.Column("company_id", sa.String(36), sa.ForeignKey("companies.id"), nullable=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("owner", sa.String(200), nullable=True),
        sa.Column("due_date", sa.String(10), nullable=True),
        sa.Column("status", sa.String(16), nullable=False),
        _ts("completed_at"),
        _ts("created_at"),
        _ts("updated_at"),
    )
    op.create_index("ix_rocks_holding_account_id", "rocks", ["holding_account_id"])
    op.create_index("ix_rocks_profit_center_id", "rocks", ["profit_center_id"])
    op.create_index("ix_rocks_company_id", "rocks", ["company_id"])
    op.create_index("ix_rocks_status", "rocks", ["status"])

    op.create_table(
        "team_members",
        _id(),
        sa.Column("holding_account_id", sa.String(36), sa.ForeignKey("holding_accounts.id"), nullable=False),
        sa.Column("email", sa.String(254), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("role", sa.String(16), nullable=False),
        sa.Column("status", sa.String(16), nullable=False),
        _ts("created_at"),
        sa.UniqueConstraint("holding_account_id", "email", name="uq_team_members_holding_email"),
    )
    op.create_index("ix_team_members_holding_account_id", "team_members", ["holding_account_id"])


def downgrade() -> None:
    """Downgrade schema."""
    for table in (
        "team_members",
        "rocks",
        "kanban_cards",
        "kanban_columns",
        "mapping_rules",
        "financial_connections",
        "overhead_items",
        "note_entries",
        "normalized_transactions",
        "profit_centers",
        "companies",
        "holding_accounts",
    ):
        op.drop_table(table)
