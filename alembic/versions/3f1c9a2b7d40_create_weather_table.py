"""create weather table

Revision ID: 3f1c9a2b7d40
Revises: 
Create Date: 2026-10-19 09:12:44.318207+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2b7d40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Decimal measurements are stored as fixed-precision text (see DecimalText)
    op.create_table(
        'weather',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('city', sa.String(length=100), nullable=False),
        sa.Column('country', sa.String(length=2), nullable=False, comment='ISO 3166-1 alpha-2 country code'),
        sa.Column('temperature', sa.String(length=7), nullable=False, comment='Air temperature in °C'),
        sa.Column('humidity', sa.Integer(), nullable=False, comment='Relative humidity in % (0-100)'),
        sa.Column('pressure', sa.String(length=9), nullable=False, comment='Atmospheric pressure in hPa'),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('wind_speed', sa.String(length=7), nullable=False, comment='Wind speed in m/s'),
        sa.Column('wind_direction', sa.Integer(), nullable=False, comment='Wind direction in degrees (0-360, where 0=North)'),
        sa.Column('visibility', sa.String(length=7), nullable=False, comment='Visibility in km'),
        sa.Column('uv_index', sa.String(length=5), nullable=False, comment='UV index (0.0-11.0)'),
        sa.Column('feels_like', sa.String(length=7), nullable=False, comment='Apparent temperature in °C'),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('humidity >= 0 AND humidity <= 100', name='check_humidity_range'),
        sa.CheckConstraint('wind_direction >= 0 AND wind_direction <= 360', name='check_wind_direction_range'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_weather_id'), 'weather', ['id'], unique=False)
    op.create_index(op.f('ix_weather_city'), 'weather', ['city'], unique=False)
    op.create_index('idx_weather_city_country_updated', 'weather', ['city', 'country', 'updated_at'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_weather_city_country_updated', table_name='weather')
    op.drop_index(op.f('ix_weather_city'), table_name='weather')
    op.drop_index(op.f('ix_weather_id'), table_name='weather')
    op.drop_table('weather')
