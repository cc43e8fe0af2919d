"""initial schema: users, boards, scraps

Revision ID: 7c1d2e9a4b10
Revises:
Create Date: 2026-10-18 10:02:11.518204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7c1d2e9a4b10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("profile_url", sa.String(), nullable=True),
        sa.Column("provider", sa.String(length=6), nullable=True),
        sa.Column("role", sa.String(length=10), nullable=False),
        sa.Column("deleted_date", sa.DateTime(), nullable=True),
        sa.Column("created_date", sa.DateTime(), nullable=False),
        sa.Column("modified_date", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_users_user_id", "users", ["user_id"])
    op.create_index("ix_users_email", "users", ["email"])

    op.create_table(
        "boards",
        sa.Column("board_id", sa.Integer(), primary_key=True),
        sa.Column("uuid", sa.Uuid(), nullable=False, unique=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.user_id"), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("tag", sa.String(length=17), nullable=False),
        sa.Column("contents", sa.Text(), nullable=True),
        sa.Column("heart_cnt", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_shared", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("fixed_date", sa.DateTime(), nullable=True),
        sa.Column("deleted_date", sa.DateTime(), nullable=True),
        sa.Column("created_date", sa.DateTime(), nullable=False),
        sa.Column("modified_date", sa.DateTime(), nullable=False),
        sa.CheckConstraint("heart_cnt >= 0", name="ck_boards_heart_cnt"),
    )
    op.create_index("ix_boards_board_id", "boards", ["board_id"])
    op.create_index("ix_boards_user_id", "boards", ["user_id"])

    op.create_table(
        "scraps",
        sa.Column("scrap_id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.user_id"), nullable=False),
        sa.Column("dtype", sa.String(length=7), nullable=False),
        sa.Column("page_url", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("site_name", sa.String(), nullable=True),
        sa.Column("thumbnail_url", sa.String(), nullable=True),
        sa.Column("price", sa.String(), nullable=True),
        sa.Column("deleted_date", sa.DateTime(), nullable=True),
        sa.Column("created_date", sa.DateTime(), nullable=False),
        sa.Column("modified_date", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_scraps_scrap_id", "scraps", ["scrap_id"])
    op.create_index("ix_scraps_user_id", "scraps", ["user_id"])


def downgrade():
    op.drop_table("scraps")
    op.drop_table("boards")
    op.drop_table("users")
