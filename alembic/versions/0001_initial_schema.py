"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-17
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "0001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "indicator_categories",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("slug", sa.String(length=100), nullable=False),
        sa.Column("default_color", sa.String(length=20), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_indicator_categories_slug", "indicator_categories", ["slug"], unique=True)

    op.create_table(
        "indicators",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.Column("slug", sa.String(length=100), nullable=False),
        sa.Column("display_name", sa.String(length=255), nullable=False),
        sa.Column("unit", sa.String(length=50), nullable=True),
        sa.Column("reference_min", sa.Float(), nullable=True),
        sa.Column("reference_max", sa.Float(), nullable=True),
        sa.Column("reference_male_min", sa.Float(), nullable=True),
        sa.Column("reference_male_max", sa.Float(), nullable=True),
        sa.Column("reference_female_min", sa.Float(), nullable=True),
        sa.Column("reference_female_max", sa.Float(), nullable=True),
        sa.Column("reference_text", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["category_id"], ["indicator_categories.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_indicators_category_id", "indicators", ["category_id"], unique=False)
    op.create_index("ix_indicators_slug", "indicators", ["slug"], unique=True)

    op.create_table(
        "indicator_translations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("indicator_id", sa.Integer(), nullable=False),
        sa.Column("language", sa.String(length=10), nullable=False),
        sa.Column("translated_name", sa.String(length=255), nullable=True),
        sa.Column("translated_reference_text", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["indicator_id"], ["indicators.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("indicator_id", "language", name="uq_indicator_translation_language"),
    )
    op.create_index("ix_indicator_translations_indicator_id", "indicator_translations", ["indicator_id"], unique=False)

    op.create_table(
        "test_sessions",
        sa.Column("id", sa.BigInteger().with_variant(sa.Integer(), "sqlite"), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("label", sa.String(length=50), nullable=True),
        sa.Column("month", sa.SmallInteger(), nullable=False),
        sa.Column("year", sa.SmallInteger(), nullable=False),
        sa.Column("measured_at", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_test_sessions_measured_at", "test_sessions", ["measured_at"], unique=False)
    op.create_index("ix_test_sessions_user_id", "test_sessions", ["user_id"], unique=False)

    op.create_table(
        "measurements",
        sa.Column("id", sa.BigInteger().with_variant(sa.Integer(), "sqlite"), autoincrement=True, nullable=False),
        sa.Column("test_session_id", sa.BigInteger().with_variant(sa.Integer(), "sqlite"), nullable=False),
        sa.Column("indicator_id", sa.Integer(), nullable=False),
        sa.Column("value", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["indicator_id"], ["indicators.id"]),
        sa.ForeignKeyConstraint(["test_session_id"], ["test_sessions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("test_session_id", "indicator_id", name="uq_measurement_session_indicator"),
    )
    op.create_index("ix_measurements_indicator_id", "measurements", ["indicator_id"], unique=False)
    op.create_index("ix_measurements_test_session_id", "measurements", ["test_session_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_measurements_test_session_id", table_name="measurements")
    op.drop_index("ix_measurements_indicator_id", table_name="measurements")
    op.drop_table("measurements")

    op.drop_index("ix_test_sessions_user_id", table_name="test_sessions")
    op.drop_index("ix_test_sessions_measured_at", table_name="test_sessions")
    op.drop_table("test_sessions")

    op.drop_index("ix_indicator_translations_indicator_id", table_name="indicator_translations")
    op.drop_table("indicator_translations")

    op.drop_index("ix_indicators_slug", table_name="indicators")
    op.drop_index("ix_indicators_category_id", table_name="indicators")
    op.drop_table("indicators")

    op.drop_index("ix_indicator_categories_slug", table_name="indicator_categories")
    op.drop_table("indicator_categories")
