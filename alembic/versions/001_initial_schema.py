"""Initial schema - action types, teams, positions, memberships, overrides, groups.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

SCOPES = "('own','team','department','organization','global')"


def upgrade() -> None:
    op.create_table(
        "action_type",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("code", sa.String(100), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        sa.Column("subcategory", sa.String(100), nullable=True),
        sa.Column("risk_level", sa.String(20), nullable=False, server_default="low"),
        sa.Column("requires_approval", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_system", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.CheckConstraint(
            "risk_level IN ('low','medium','high','critical')", name="ck_action_type_risk_level"
        ),
    )
    op.create_index("ix_action_type_code", "action_type", ["code"], unique=True)

    op.create_table(
        "team",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("team_type", sa.String(50), nullable=True),
        sa.Column("parent_team_id", sa.UUID(), sa.ForeignKey("team.id", ondelete="SET NULL"), nullable=True),
    )

    op.create_table(
        "position",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("position_type", sa.String(50), nullable=True),
    )

    op.create_table(
        "team_member",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("person_id", sa.String(255), nullable=False),
        sa.Column("team_id", sa.UUID(), sa.ForeignKey("team.id", ondelete="CASCADE"), nullable=False),
        sa.Column("position_id", sa.UUID(), sa.ForeignKey("position.id"), nullable=True),
        sa.Column("member_role", sa.String(20), nullable=False, server_default="member"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.CheckConstraint(
            "member_role IN ('owner','lead','member','guest','observer')",
            name="ck_team_member_role",
        ),
    )
    op.create_index("ix_team_member_person_active", "team_member", ["person_id", "is_active"])

    op.create_table(
        "position_permission",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("position_id", sa.UUID(), sa.ForeignKey("position.id", ondelete="CASCADE"), nullable=False),
        sa.Column("action_type_id", sa.UUID(), sa.ForeignKey("action_type.id", ondelete="CASCADE"), nullable=False),
        sa.Column("scope", sa.String(20), nullable=False),
        sa.Column("can_delegate", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.CheckConstraint(f"scope IN {SCOPES}", name="ck_position_permission_scope"),
    )
    op.create_index(
        "ix_position_permission_position_action",
        "position_permission",
        ["position_id", "action_type_id"],
    )

    op.create_table(
        "user_permission_override",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("person_id", sa.String(255), nullable=False),
        sa.Column("action_type_id", sa.UUID(), sa.ForeignKey("action_type.id", ondelete="CASCADE"), nullable=False),
        sa.Column("is_granted", sa.Boolean(), nullable=False),
        sa.Column("scope", sa.String(20), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("revoked_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("granted_by", sa.String(255), nullable=True),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint(f"scope IS NULL OR scope IN {SCOPES}", name="ck_override_scope"),
    )
    op.create_index(
        "ix_override_person_action_active",
        "user_permission_override",
        ["person_id", "action_type_id"],
        postgresql_where=sa.text("revoked_at IS NULL"),
    )

    op.create_table(
        "permission_group",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )

    op.create_table(
        "permission_group_action",
        sa.Column("group_id", sa.UUID(), sa.ForeignKey("permission_group.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("action_type_id", sa.UUID(), sa.ForeignKey("action_type.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("scope", sa.String(20), nullable=True),
        sa.CheckConstraint(f"scope IS NULL OR scope IN {SCOPES}", name="ck_group_action_scope"),
    )

    op.create_table(
        "user_group_assignment",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("person_id", sa.String(255), nullable=False),
        sa.Column("group_id", sa.UUID(), sa.ForeignKey("permission_group.id", ondelete="CASCADE"), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_user_group_assignment_person", "user_group_assignment", ["person_id"])


def downgrade() -> None:
    op.drop_table("user_group_assignment")
    op.drop_table("permission_group_action")
    op.drop_table("permission_group")
    op.drop_table("user_permission_override")
    op.drop_table("position_permission")
    op.drop_table("team_member")
    op.drop_table("position")
    op.drop_table("team")
    op.drop_table("action_type")
