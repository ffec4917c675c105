"""Create source, grouping and message tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""

import sqlalchemy as sa
from alembic import op

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "districts",
        sa.Column("precinct", sa.String(50), nullable=False),
        sa.Column("district", sa.String(50), nullable=False),
        sa.PrimaryKeyConstraint("precinct", "district"),
    )
    op.create_index("ix_districts_district", "districts", ["district"])

    op.create_table(
        "candidates",
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("office", sa.String(200), nullable=False),
        sa.Column("district", sa.String(50), nullable=False),
        sa.Column("unopposed", sa.Boolean(), nullable=False),
        sa.Column("triggers_precinct", sa.Boolean(), nullable=False),
        sa.Column("display_weight", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("name"),
    )
    op.create_index("ix_candidates_district", "candidates", ["district"])

    op.create_table(
        "voters",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("precinct", sa.String(50), nullable=False),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("phone_1", sa.String(30), nullable=True),
        sa.Column("phone_2", sa.String(30), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_voters_precinct", "voters", ["precinct"])

    op.create_table(
        "target_groupings",
        sa.Column("grouping_hash", sa.String(64), nullable=False),
        sa.Column("districts_json", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("grouping_hash"),
    )

    op.create_table(
        "target_precincts",
        sa.Column("precinct", sa.String(50), nullable=False),
        sa.Column("grouping_hash", sa.String(64), nullable=False),
        sa.ForeignKeyConstraint(["grouping_hash"], ["target_groupings.grouping_hash"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("precinct"),
    )
    op.create_index("ix_target_precincts_grouping_hash", "target_precincts", ["grouping_hash"])

    op.create_table(
        "text_messages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("batch_id", sa.String(100), nullable=False),
        sa.Column("grouping_hash", sa.String(64), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("precincts", sa.Text(), nullable=False),
        sa.Column("num_candidates", sa.Integer(), nullable=False),
        sa.Column("num_recipients", sa.Integer(), nullable=False),
        sa.Column("cost_per_recipient", sa.Float(), nullable=False),
        sa.Column("total_cost", sa.Float(), nullable=False),
        sa.Column("cost_per_candidate", sa.Float(), nullable=False),
        sa.Column("candidates", sa.Text(), nullable=False),
        sa.Column("recipients", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("batch_id", "grouping_hash", name="uq_text_messages_batch_grouping"),
    )
    op.create_index("ix_text_messages_batch_id", "text_messages", ["batch_id"])


def downgrade() -> None:
    op.drop_index("ix_text_messages_batch_id", table_name="text_messages")
    op.drop_table("text_messages")
    op.drop_index("ix_target_precincts_grouping_hash", table_name="target_precincts")
    op.drop_table("target_precincts")
    op.drop_table("target_groupings")
    op.drop_index("ix_voters_precinct", table_name="voters")
    op.drop_table("voters")
    op.drop_index("ix_candidates_district", table_name="candidates")
    op.drop_table("candidates")
    op.drop_index("ix_districts_district", table_name="districts")
    op.drop_table("districts")
