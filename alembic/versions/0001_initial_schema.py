"""Create word, pronunciation and stage word tables"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "words",
        sa.Column("id", sa.String(length=64), primary_key=True, nullable=False),
        sa.Column("word_name", sa.String(length=255), nullable=False),
        sa.Column("definition", sa.Text(), nullable=True),
        sa.Column("phonetic_spelling", sa.String(length=255), nullable=True),
        sa.Column("sentence", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("level", sa.Integer(), server_default=sa.text("1"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    )
    op.create_index("ix_words_word_name", "words", ["word_name"], unique=False)
    op.create_index("ix_words_level", "words", ["level"], unique=False)

    op.create_table(
        "pronunciations",
        sa.Column("id", sa.String(length=64), primary_key=True, nullable=False),
        sa.Column(
            "word_id",
            sa.String(length=64),
            sa.ForeignKey("words.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("audio_description", sa.Text(), nullable=True),
        sa.Column("audio_url", sa.String(length=1024), nullable=True),
        sa.Column("audio_duration", sa.Integer(), nullable=True),
        sa.Column("audio_size", sa.Integer(), nullable=True),
        sa.Column("definition", sa.Text(), nullable=True),
        sa.Column("phonetic_spelling", sa.String(length=255), nullable=True),
        sa.Column("speaker_gender", sa.String(length=20), nullable=True),
        sa.Column("type", sa.String(length=32), nullable=False),
    )
    op.create_index("ix_pronunciations_word_id", "pronunciations", ["word_id"], unique=False)

    op.create_table(
        "stage_words",
        sa.Column("id", sa.String(length=64), primary_key=True, nullable=False),
        sa.Column(
            "word_id",
            sa.String(length=64),
            sa.ForeignKey("words.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("status", sa.String(length=32), nullable=False),
        sa.Column("listened_qty", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("last_updated_date_time", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_stage_words_word_id", "stage_words", ["word_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_stage_words_word_id", table_name="stage_words")
    op.drop_table("stage_words")
    op.drop_index("ix_pronunciations_word_id", table_name="pronunciations")
    op.drop_table("pronunciations")
    op.drop_index("ix_words_level", table_name="words")
    op.drop_index("ix_words_word_name", table_name="words")
    op.drop_table("words")
