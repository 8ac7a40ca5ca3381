"""Initial schema - ClickClick high scores

Revision ID: 001
Revises:
Create Date: 2026-10-19

Creates the single table used by ClickClick:
- high_scores: every new best score, appended when a round beats the previous one
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ### High scores table ###
    op.create_table(
        'high_scores',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('value', sa.Integer(), nullable=False),
        sa.Column('achieved_at', sa.DateTime(), nullable=True),
    )

    op.create_index('ix_high_scores_value', 'high_scores', ['value'])


def downgrade() -> None:
    op.drop_index('ix_high_scores_value', 'high_scores')
    op.drop_table('high_scores')
