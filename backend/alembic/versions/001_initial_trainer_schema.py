"""Create users, trainers, trainees, programs, requests, reports and weekly plans

Revision ID: 001_trainer_schema
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_trainer_schema'
down_revision = None
branch_labels = None
depends_on = None

WEEKDAYS = ('monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday')


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=True),
        sa.Column('last_name', sa.String(100), nullable=True),
        sa.Column('role', sa.String(50), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_id', 'users', ['id'], unique=False)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'trainers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('user_name', sa.String(100), nullable=True),
        sa.Column('status', sa.String(50), nullable=True),
        sa.Column('coach_experience', sa.Integer(), nullable=True),
        sa.Column('contact', sa.String(255), nullable=True),
        sa.Column('language', sa.String(64), nullable=True),
        sa.Column('country', sa.String(100), nullable=True),
        sa.Column('sports', sa.JSON(), nullable=True),
        sa.Column('achievements', sa.JSON(), nullable=True),
        sa.Column('education', sa.JSON(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_trainers_id', 'trainers', ['id'], unique=False)
    op.create_index('ix_trainers_user_id', 'trainers', ['user_id'], unique=True)

    op.create_table(
        'trainees',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('trainer_id', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.ForeignKeyConstraint(['trainer_id'], ['trainers.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_trainees_id', 'trainees', ['id'], unique=False)
    op.create_index('ix_trainees_user_id', 'trainees', ['user_id'], unique=True)
    op.create_index('ix_trainees_trainer_id', 'trainees', ['trainer_id'], unique=False)

    op.create_table(
        'active_days',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('trainer_id', sa.Integer(), nullable=False),
        *[sa.Column(day, sa.Boolean(), nullable=False, server_default=sa.false()) for day in WEEKDAYS],
        sa.ForeignKeyConstraint(['trainer_id'], ['trainers.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('trainer_id')
    )

    op.create_table(
        'program_requests',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('trainer_id', sa.Integer(), nullable=False),
        sa.Column('trainee_id', sa.Integer(), nullable=False),
        sa.Column('trainee_name', sa.String(255), nullable=True),
        sa.Column('date', sa.Date(), nullable=True),
        sa.Column('price', sa.Float(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(50), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['trainer_id'], ['trainers.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['trainee_id'], ['trainees.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_program_requests_id', 'program_requests', ['id'], unique=False)
    op.create_index('ix_program_requests_trainer_id', 'program_requests', ['trainer_id'], unique=False)

    op.create_table(
        'training_programs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('trainer_id', sa.Integer(), nullable=False),
        sa.Column('trainee_id', sa.Integer(), nullable=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['trainer_id'], ['trainers.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['trainee_id'], ['trainees.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_training_programs_id', 'training_programs', ['id'], unique=False)
    op.create_index('ix_training_programs_trainer_id', 'training_programs', ['trainer_id'], unique=False)

    op.create_table(
        'sport_activities',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('program_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('day', sa.String(16), nullable=True),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        sa.Column('sets', sa.Integer(), nullable=True),
        sa.Column('repetitions', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['program_id'], ['training_programs.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_sport_activities_id', 'sport_activities', ['id'], unique=False)

    op.create_table(
        'reports',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_reports_id', 'reports', ['id'], unique=False)
    op.create_index('ix_reports_user_id', 'reports', ['user_id'], unique=False)


def downgrade() -> None:
    op.drop_table('reports')
    op.drop_table('sport_activities')
    op.drop_table('training_programs')
    op.drop_table('program_requests')
    op.drop_table('active_days')
    op.drop_table('trainees')
    op.drop_table('trainers')
    op.drop_table('users')
