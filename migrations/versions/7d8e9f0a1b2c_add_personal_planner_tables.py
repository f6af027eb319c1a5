"""add personal planner tables

Revision ID: 7d8e9f0a1b2c
Revises: 1c2d3e4f5a6b
Create Date: 2025-03-09 18:30:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '7d8e9f0a1b2c'
down_revision = '1c2d3e4f5a6b'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'personal_events',
        sa.Column('event_id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('date', sa.String(length=10), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=True),
        sa.Column('mood', sa.String(length=50), nullable=True),
        sa.Column('medication_taken', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('special_moment', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('special_moment_description', sa.Text(), nullable=True),
        sa.Column('diary_notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('event_id'),
        sa.UniqueConstraint('user_id', 'date', name='uq_personal_event_user_date')
    )

    op.create_table(
        'ideas',
        sa.Column('idea_id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('client_id', sa.String(length=36), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['client_id'], ['clients.client_id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('idea_id')
    )

    op.create_table(
        'tasks',
        sa.Column('task_id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('task_id')
    )


def downgrade():
    op.drop_table('tasks')
    op.drop_table('ideas')
    op.drop_table('personal_events')
