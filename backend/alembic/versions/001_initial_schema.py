"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create companies table
    op.create_table(
        'companies',
        sa.Column('handle', sa.String(25), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('num_employees', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('logo_url', sa.Text(), nullable=True),
        sa.CheckConstraint('num_employees >= 0', name='ck_companies_num_employees'),
        sa.PrimaryKeyConstraint('handle'),
        sa.UniqueConstraint('name')
    )

    # Create users table
    op.create_table(
        'users',
        sa.Column('username', sa.String(25), nullable=False),
        sa.Column('password', sa.Text(), nullable=False),
        sa.Column('first_name', sa.Text(), nullable=False),
        sa.Column('last_name', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.PrimaryKeyConstraint('username')
    )

    # Create jobs table
    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('salary', sa.Integer(), nullable=True),
        sa.Column('equity', sa.Numeric(), nullable=True),
        sa.Column('company_handle', sa.String(25), nullable=False),
        sa.CheckConstraint('salary >= 0', name='ck_jobs_salary'),
        sa.CheckConstraint('equity >= 0 AND equity <= 1.0', name='ck_jobs_equity'),
        sa.ForeignKeyConstraint(['company_handle'], ['companies.handle'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_jobs_company_handle', 'jobs', ['company_handle'])

    # Create applications table; the composite key rejects duplicate applications
    op.create_table(
        'applications',
        sa.Column('username', sa.String(25), nullable=False),
        sa.Column('job_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['username'], ['users.username'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['job_id'], ['jobs.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('username', 'job_id')
    )


def downgrade() -> None:
    op.drop_table('applications')
    op.drop_index('ix_jobs_company_handle', table_name='jobs')
    op.drop_table('jobs')
    op.drop_table('users')
    op.drop_table('companies')
