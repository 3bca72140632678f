"""create bookings with per-event bed uniqueness

Revision ID: b2c3d4e5f6a7
Revises: a1b2c3d4e5f6
Create Date: 2026-02-02 00:10:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'b2c3d4e5f6a7'
down_revision = 'a1b2c3d4e5f6'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'bookings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('bed_id', sa.String(length=50), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('blocked_by', sa.String(length=50), nullable=True),
        sa.Column('booked_at', sa.DateTime(), nullable=False),
        sa.Column('arrival_date', sa.Date(), nullable=True),
        sa.Column('arrival_time', sa.String(length=5), nullable=True),
        sa.Column('departure_date', sa.Date(), nullable=True),
        sa.Column('departure_time', sa.String(length=5), nullable=True),
        sa.Column('transport', sa.String(length=20), nullable=True),
        sa.Column('needs_pickup', sa.Boolean(), nullable=False),
        sa.Column('offers_ride_seats', sa.Integer(), nullable=False),
        sa.Column('departure_city', sa.String(length=100), nullable=True),
        sa.Column('train_station', sa.String(length=100), nullable=True),
        sa.Column('train_time', sa.String(length=5), nullable=True),
        sa.Column('train_number', sa.String(length=20), nullable=True),
        sa.CheckConstraint("status IN ('booked', 'blocked', 'women_only', 'men_only')", name='ck_bookings_status'),
        sa.CheckConstraint("status = 'booked' OR blocked_by IS NOT NULL", name='ck_bookings_restriction_anchor'),
        sa.ForeignKeyConstraint(['event_id'], ['events.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('event_id', 'bed_id', name='uq_bookings_event_bed')
    )
    with op.batch_alter_table('bookings', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_bookings_event_id'), ['event_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_bookings_blocked_by'), ['blocked_by'], unique=False)


def downgrade():
    with op.batch_alter_table('bookings', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_bookings_blocked_by'))
        batch_op.drop_index(batch_op.f('ix_bookings_event_id'))

    op.drop_table('bookings')
