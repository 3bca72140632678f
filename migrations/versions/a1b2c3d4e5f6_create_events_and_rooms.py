"""create events, event rooms and audit logs

Revision ID: a1b2c3d4e5f6
Revises: 
Create Date: 2026-02-02 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'a1b2c3d4e5f6'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'events',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('slug', sa.String(length=60), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('location_name', sa.String(length=160), nullable=True),
        sa.Column('location_address', sa.String(length=255), nullable=True),
        sa.Column('location_url', sa.String(length=255), nullable=True),
        sa.Column('check_in_time', sa.String(length=5), nullable=True),
        sa.Column('check_out_time', sa.String(length=5), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('events', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_events_slug'), ['slug'], unique=True)

    op.create_table(
        'event_rooms',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=False),
        sa.Column('room_name', sa.String(length=80), nullable=False),
        sa.Column('floor', sa.String(length=20), nullable=True),
        sa.Column('beds_count', sa.Integer(), nullable=False),
        sa.Column('has_private_bath', sa.Boolean(), nullable=False),
        sa.Column('is_accessible', sa.Boolean(), nullable=False),
        sa.Column('notes', sa.String(length=255), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['event_id'], ['events.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('event_rooms', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_event_rooms_event_id'), ['event_id'], unique=False)

    op.create_table(
        'audit_logs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('event_id', sa.Integer(), nullable=True),
        sa.Column('action', sa.String(length=80), nullable=False),
        sa.Column('entity', sa.String(length=80), nullable=True),
        sa.Column('entity_id', sa.String(length=80), nullable=True),
        sa.Column('ip', sa.String(length=64), nullable=True),
        sa.Column('user_agent', sa.String(length=255), nullable=True),
        sa.Column('metadata_json', sa.Text(), nullable=True),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('audit_logs', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_audit_logs_event_id'), ['event_id'], unique=False)


def downgrade():
    with op.batch_alter_table('audit_logs', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_audit_logs_event_id'))
    op.drop_table('audit_logs')

    with op.batch_alter_table('event_rooms', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_event_rooms_event_id'))
    op.drop_table('event_rooms')

    with op.batch_alter_table('events', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_events_slug'))
    op.drop_table('events')
