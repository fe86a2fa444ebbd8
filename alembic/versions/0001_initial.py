"""
Начальная схема: пользователи, сессии теста, дорожные карты, карьерные деревья
alembic/versions/0001_initial.py

Команды для применения:
alembic upgrade head
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = 'initial_0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Создание таблиц"""

    # 1. Пользователи
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('full_name', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('role', sa.String(), nullable=True),
        sa.Column('interests', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # 2. Сессии карьерного теста
    op.create_table(
        'quiz_sessions',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('phase1_answers', sa.JSON(), nullable=True),
        sa.Column('phase2_questions', sa.JSON(), nullable=True),
        sa.Column('phase2_answers', sa.JSON(), nullable=True),
        sa.Column('results', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_quiz_sessions_user_id', 'quiz_sessions', ['user_id'])

    # 3. Дорожные карты
    op.create_table(
        'roadmaps',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('career_goal', sa.Text(), nullable=False),
        sa.Column('stages', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_roadmaps_id', 'roadmaps', ['id'])
    op.create_index('ix_roadmaps_user_id', 'roadmaps', ['user_id'])

    # 4. Карьерные деревья
    op.create_table(
        'career_trees',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('root_title', sa.String(), nullable=False),
        sa.Column('form_input', sa.JSON(), nullable=True),
        sa.Column('tree_data', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_career_trees_id', 'career_trees', ['id'])
    op.create_index('ix_career_trees_user_id', 'career_trees', ['user_id'])


def downgrade() -> None:
    """Удаление таблиц"""
    op.drop_table('career_trees')
    op.drop_table('roadmaps')
    op.drop_table('quiz_sessions')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')
