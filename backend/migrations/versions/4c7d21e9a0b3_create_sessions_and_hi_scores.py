"""create sessions and hi_scores

Revision ID: 4c7d21e9a0b3
Revises:
Create Date: 2026-10-18 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4c7d21e9a0b3'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    tables = set(insp.get_table_names())

    if 'sessions' not in tables:
        op.create_table(
            'sessions',
            sa.Column('token', sa.String(length=64), nullable=False),
            sa.Column('issued_at', sa.DateTime(timezone=True), nullable=False),
            sa.PrimaryKeyConstraint('token'),
        )
        op.create_index('ix_sessions_issued_at', 'sessions', ['issued_at'])

    if 'hi_scores' not in tables:
        op.create_table(
            'hi_scores',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('gig_id', sa.Integer(), nullable=False),
            sa.Column('shift_id', sa.Integer(), nullable=False),
            sa.Column('player_name', sa.String(length=3), nullable=False),
            sa.Column('score', sa.Integer(), nullable=False),
            sa.Column('ip_addr', sa.String(length=64), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index('ix_hi_scores_gig_id', 'hi_scores', ['gig_id'])
        op.create_index('ix_hi_scores_shift_id', 'hi_scores', ['shift_id'])
        op.create_index('ix_hi_scores_score', 'hi_scores', ['score'])


def downgrade():
    op.drop_index('ix_hi_scores_score', table_name='hi_scores')
    op.drop_index('ix_hi_scores_shift_id', table_name='hi_scores')
    op.drop_index('ix_hi_scores_gig_id', table_name='hi_scores')
    op.drop_table('hi_scores')
    op.drop_index('ix_sessions_issued_at', table_name='sessions')
    op.drop_table('sessions')
