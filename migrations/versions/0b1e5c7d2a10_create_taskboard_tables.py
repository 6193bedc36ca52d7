"""create taskboard tables

Revision ID: 0b1e5c7d2a10
Revises:
Create Date: 2026-10-16 09:12:44.318205

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0b1e5c7d2a10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'projects',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_by_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True,
    )
    op.create_index('idx_projects_created_by_id', 'projects', ['created_by_id'], unique=False)

    op.create_table(
        'tasks',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('priority', sa.String(length=20), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=True),
        sa.Column('assigned_to_id', sa.Integer(), nullable=True),
        sa.Column('project_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("status in ('TODO','IN_PROGRESS','DONE')", name='ck_tasks_status'),
        sa.CheckConstraint("priority in ('LOW','MEDIUM','HIGH')", name='ck_tasks_priority'),
        sqlite_autoincrement=True,
    )
    op.create_index('idx_tasks_status_priority', 'tasks', ['status', 'priority'], unique=False)
    op.create_index('idx_tasks_assigned_to_id', 'tasks', ['assigned_to_id'], unique=False)
    op.create_index('idx_tasks_project_id', 'tasks', ['project_id'], unique=False)

    op.create_table(
        'entities',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('owner_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("status in ('ACTIVE','INACTIVE','PENDING','COMPLETED')", name='ck_entities_status'),
        sqlite_autoincrement=True,
    )
    op.create_index('idx_entities_status', 'entities', ['status'], unique=False)
    op.create_index('idx_entities_created_at', 'entities', ['created_at'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_entities_created_at', table_name='entities')
    op.drop_index('idx_entities_status', table_name='entities')
    op.drop_table('entities')
    op.drop_index('idx_tasks_project_id', table_name='tasks')
    op.drop_index('idx_tasks_assigned_to_id', table_name='tasks')
    op.drop_index('idx_tasks_status_priority', table_name='tasks')
    op.drop_table('tasks')
    op.drop_index('idx_projects_created_by_id', table_name='projects')
    op.drop_table('projects')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
