"""
Сохранённые вакансии и статус отклика
alembic/versions/0002_saved_jobs.py

Команды для применения:
alembic upgrade head
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = 'saved_jobs_0002'
down_revision: Union[str, None] = 'initial_0001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'saved_jobs',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('job_id', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('company', sa.String(), nullable=False),
        sa.Column('location', sa.String(), nullable=False, server_default=''),
        sa.Column('url', sa.String(), nullable=False),
        sa.Column('source', sa.String(), nullable=False, server_default='jsearch'),
        sa.Column('status', sa.String(), nullable=False, server_default='saved'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'job_id', name='uq_saved_jobs_user_job')
    )
    op.create_index('ix_saved_jobs_user_id', 'saved_jobs', ['user_id'])


def downgrade() -> None:
    op.drop_index('ix_saved_jobs_user_id', table_name='saved_jobs')
    op.drop_table('saved_jobs')
