"""create challenges, candidates and submissions tables

Revision ID: 0001_assessment
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "0001_assessment"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_DIFFICULTY = postgresql.ENUM("easy", "medium", "hard", name="challenge_difficulty", create_type=False)
_CATEGORY = postgresql.ENUM(
    "rls", "storage", "auth", "queries", "migrations", "other", name="challenge_category", create_type=False
)


def _has_table(name: str) -> bool:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    return name in inspector.get_table_names()


def upgrade() -> None:
    bind = op.get_bind()
    _DIFFICULTY.create(bind, checkfirst=True)
    _CATEGORY.create(bind, checkfirst=True)

    if not _has_table("challenges"):
        op.create_table(
            "challenges",
            sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
            sa.Column("challenge_number", sa.Integer(), nullable=False),
            sa.Column("title", sa.String(length=255), nullable=False),
            sa.Column("description", sa.Text(), nullable=False),
            sa.Column("difficulty", _DIFFICULTY, nullable=False),
            sa.Column("category", _CATEGORY, nullable=False, server_default="other"),
            sa.Column("points", sa.Integer(), nullable=False, server_default="10"),
            sa.Column("hint", sa.Text(), nullable=True),
            sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        )
        op.create_index("ix_challenges_challenge_number", "challenges", ["challenge_number"], unique=True)

    if not _has_table("candidates"):
        op.create_table(
            "candidates",
            sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
            sa.Column("email", sa.String(length=255), nullable=False),
            sa.Column("name", sa.String(length=255), nullable=False),
            sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        )
        op.create_index("ix_candidates_email", "candidates", ["email"], unique=True)

    if not _has_table("submissions"):
        op.create_table(
            "submissions",
            sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
            sa.Column(
                "candidate_id",
                postgresql.UUID(as_uuid=True),
                sa.ForeignKey("candidates.id", ondelete="CASCADE"),
                nullable=False,
            ),
            sa.Column(
                "challenge_id",
                postgresql.UUID(as_uuid=True),
                sa.ForeignKey("challenges.id", ondelete="CASCADE"),
                nullable=False,
            ),
            sa.Column("answer", sa.Text(), nullable=False),
            sa.Column("code_snippet", sa.Text(), nullable=True),
            sa.Column("submitted_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        )
        op.create_index("ix_submissions_candidate_id", "submissions", ["candidate_id"], unique=False)
        op.create_index("ix_submissions_challenge_id", "submissions", ["challenge_id"], unique=False)
        op.create_unique_constraint(
            "uq_submissions_candidate_challenge",
            "submissions",
            ["candidate_id", "challenge_id"],
        )


def downgrade() -> None:
    if _has_table("submissions"):
        op.drop_constraint("uq_submissions_candidate_challenge", "submissions", type_="unique")
        op.drop_index("ix_submissions_challenge_id", table_name="submissions")
        op.drop_index("ix_submissions_candidate_id", table_name="submissions")
        op.drop_table("submissions")
    if _has_table("candidates"):
        op.drop_index("ix_candidates_email", table_name="candidates")
        op.drop_table("candidates")
    if _has_table("challenges"):
        op.drop_index("ix_challenges_challenge_number", table_name="challenges")
        op.drop_table("challenges")
    bind = op.get_bind()
    _CATEGORY.drop(bind, checkfirst=True)
    _DIFFICULTY.drop(bind, checkfirst=True)
