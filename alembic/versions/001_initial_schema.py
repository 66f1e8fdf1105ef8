"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create chat_interactions table
    op.create_table(
        'chat_interactions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
        sa.Column('session_id', sa.String(255), nullable=False),
        sa.Column('messages', sa.JSON().with_variant(postgresql.JSONB(), 'postgresql'), nullable=False),
        sa.Column('rating', sa.Enum('helpful', 'unhelpful', name='rating'), nullable=True),
        sa.Column('rated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_chat_interactions_session_id', 'chat_interactions', ['session_id'])
    op.create_index('ix_chat_interactions_timestamp', 'chat_interactions', ['timestamp'])

    # Create session_preferences table
    op.create_table(
        'session_preferences',
        sa.Column('session_id', sa.String(255), nullable=False),
        sa.Column('selected_option', sa.String(100), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('session_id')
    )


def downgrade() -> None:
    op.drop_table('session_preferences')
    op.drop_index('ix_chat_interactions_timestamp', table_name='chat_interactions')
    op.drop_index('ix_chat_interactions_session_id', table_name='chat_interactions')
    op.drop_table('chat_interactions')
    sa.Enum(name='rating').drop(op.get_bind(), checkfirst=True)
