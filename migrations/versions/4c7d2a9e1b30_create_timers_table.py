"""create timers table

Revision ID: 4c7d2a9e1b30
Revises: 
Create Date: 2026-10-19 10:30:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4c7d2a9e1b30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'timers' in set(insp.get_table_names()):
        return

    op.create_table(
        'timers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('baseline_seconds', sa.Integer(), nullable=False),
        sa.Column('original_duration_seconds', sa.Integer(), nullable=False),
        sa.Column('is_running', sa.Boolean(), nullable=False),
        sa.Column('anchor_time', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('timers') as batch_op:
        batch_op.create_index(batch_op.f('ix_timers_created_at'), ['created_at'], unique=False)


def downgrade():
    with op.batch_alter_table('timers') as batch_op:
        batch_op.drop_index(batch_op.f('ix_timers_created_at'))
    op.drop_table('timers')
