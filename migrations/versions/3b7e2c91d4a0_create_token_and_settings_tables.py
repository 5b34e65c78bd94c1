"""Create api_token and settings_record tables

Revision ID: 3b7e2c91d4a0
Revises:
Create Date: 2026-10-19 09:12:41.508113

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e2c91d4a0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'api_token',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('token', sa.String(length=100), nullable=False),
        sa.Column('domain', sa.String(length=253), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('last_used', sa.DateTime(), nullable=True),
        sa.Column('request_count', sa.Integer(), nullable=False),
        sa.Column('deactivated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('api_token', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_api_token_token'), ['token'], unique=True)

    op.create_table(
        'settings_record',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('key', sa.String(length=300), nullable=False),
        sa.Column('profile', sa.String(length=50), nullable=False),
        sa.Column('custom_settings', sa.JSON(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('settings_record', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_settings_record_key'), ['key'], unique=True)


def downgrade():
    with op.batch_alter_table('settings_record', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_settings_record_key'))
    op.drop_table('settings_record')

    with op.batch_alter_table('api_token', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_api_token_token'))
    op.drop_table('api_token')
