"""Create locations and per-category cache tables

Revision ID: 3c1e9a7b2d40
Revises:
Create Date: 2026-10-19 10:20:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c1e9a7b2d40'
down_revision = None
branch_labels = None
depends_on = None


def _cached_record_columns():
    return [
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('location_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['location_id'], ['locations.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    ]


def upgrade():
    op.create_table(
        'locations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('search_query', sa.String(length=256), nullable=False),
        sa.Column('formatted_query', sa.String(length=512), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_locations_search_query', 'locations', ['search_query'], unique=False)

    op.create_table(
        'weathers',
        sa.Column('forecast', sa.Text(), nullable=True),
        sa.Column('time', sa.String(length=32), nullable=True),
        *_cached_record_columns(),
    )
    op.create_table(
        'restaurants',
        sa.Column('name', sa.String(length=256), nullable=True),
        sa.Column('image_url', sa.String(length=2048), nullable=True),
        sa.Column('price', sa.String(length=8), nullable=True),
        sa.Column('rating', sa.Float(), nullable=True),
        sa.Column('url', sa.String(length=2048), nullable=True),
        *_cached_record_columns(),
    )
    op.create_table(
        'movies',
        sa.Column('title', sa.String(length=512), nullable=True),
        sa.Column('overview', sa.Text(), nullable=True),
        sa.Column('average_votes', sa.Float(), nullable=True),
        sa.Column('total_votes', sa.Integer(), nullable=True),
        sa.Column('image_url', sa.String(length=2048), nullable=True),
        sa.Column('popularity', sa.Float(), nullable=True),
        sa.Column('released_on', sa.String(length=32), nullable=True),
        *_cached_record_columns(),
    )
    op.create_table(
        'meetups',
        sa.Column('link', sa.String(length=2048), nullable=True),
        sa.Column('name', sa.String(length=512), nullable=True),
        sa.Column('creation_date', sa.String(length=32), nullable=True),
        sa.Column('host', sa.String(length=256), nullable=True),
        *_cached_record_columns(),
    )
    op.create_table(
        'trails',
        sa.Column('name', sa.String(length=256), nullable=True),
        sa.Column('location', sa.String(length=256), nullable=True),
        sa.Column('length', sa.Float(), nullable=True),
        sa.Column('stars', sa.Float(), nullable=True),
        sa.Column('star_votes', sa.Integer(), nullable=True),
        sa.Column('summary', sa.Text(), nullable=True),
        sa.Column('trail_url', sa.String(length=2048), nullable=True),
        sa.Column('conditions', sa.Text(), nullable=True),
        sa.Column('condition_date', sa.String(length=16), nullable=True),
        sa.Column('condition_time', sa.String(length=16), nullable=True),
        *_cached_record_columns(),
    )

    for table in ('weathers', 'restaurants', 'movies', 'meetups', 'trails'):
        op.create_index(f'ix_{table}_location_id', table, ['location_id'], unique=False)


def downgrade():
    for table in ('trails', 'meetups', 'movies', 'restaurants', 'weathers'):
        op.drop_index(f'ix_{table}_location_id', table_name=table)
        op.drop_table(table)

    op.drop_index('ix_locations_search_query', table_name='locations')
    op.drop_table('locations')
