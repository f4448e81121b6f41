"""Create blacklist_entries table

Revision ID: 20260101_000001
Revises: 
Create Date: 2026-01-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '20260101_000001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'blacklist_entries',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('identifier', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=True),
        sa.Column('last_name', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('created_by', sa.String(20), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )
    # One entry per identifier; concurrent duplicate inserts fail here
    op.create_index('uq_blacklist_entries_identifier', 'blacklist_entries', ['identifier'], unique=True)
    op.create_index('ix_blacklist_entries_names', 'blacklist_entries', ['first_name', 'last_name'])
    op.create_index('ix_blacklist_entries_created_by', 'blacklist_entries', ['created_by'])
    op.create_index('ix_blacklist_entries_created_at', 'blacklist_entries', ['created_at'])


def downgrade() -> None:
    op.drop_index('ix_blacklist_entries_created_at', 'blacklist_entries')
    op.drop_index('ix_blacklist_entries_created_by', 'blacklist_entries')
    op.drop_index('ix_blacklist_entries_names', 'blacklist_entries')
    op.drop_index('uq_blacklist_entries_identifier', 'blacklist_entries')
    op.drop_table('blacklist_entries')
