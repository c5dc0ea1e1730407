"""create exercise catalog tables

Revision ID: 8f3a1c2d9b7e
Revises:
Create Date: 2024-06-01 00:00:00.000000
"""
import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = '8f3a1c2d9b7e'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('notes', sa.Text(), server_default='', nullable=False),
        sa.Column('deleted', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_exercises')),
    )
    op.create_index('ix_exercises_deleted', 'exercises', ['deleted'], unique=False)

    op.create_table(
        'exercise_target_muscles',
        sa.Column('exercise_id', sa.Integer(), nullable=False),
        sa.Column('muscle', sa.String(length=20), nullable=False),
        sa.Column('factor', sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(
            ['exercise_id'], ['exercises.id'],
            name=op.f('fk_exercise_target_muscles_exercise_id_exercises'),
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('exercise_id', 'muscle', name=op.f('pk_exercise_target_muscles')),
    )

    op.create_table(
        'exercise_rep_ranges',
        sa.Column('exercise_id', sa.Integer(), nullable=False),
        sa.Column('rep_range', sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(
            ['exercise_id'], ['exercises.id'],
            name=op.f('fk_exercise_rep_ranges_exercise_id_exercises'),
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('exercise_id', 'rep_range', name=op.f('pk_exercise_rep_ranges')),
    )


def downgrade():
    op.drop_table('exercise_rep_ranges')
    op.drop_table('exercise_target_muscles')
    op.drop_index('ix_exercises_deleted', table_name='exercises')
    op.drop_table('exercises')
