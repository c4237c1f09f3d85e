"""directory_0001_init

Create tables:
- facilities
- waitlist
"""

from alembic import op

revision = "directory_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS facilities (
          id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
          name TEXT NOT NULL,
          description TEXT NULL,
          facility_type VARCHAR(32) NOT NULL CHECK (
            facility_type IN ('sauna', 'cold_plunge', 'ice_bath', 'wellness_centre', 'spa_hotel', 'thermal_bath')
          ),
          address TEXT NOT NULL DEFAULT '',
          city VARCHAR(128) NOT NULL,
          county VARCHAR(128) NOT NULL,
          postcode VARCHAR(16) NOT NULL DEFAULT '',
          phone VARCHAR(64) NULL,
          email VARCHAR(320) NULL,
          website TEXT NULL,
          latitude DOUBLE PRECISION NULL,
          longitude DOUBLE PRECISION NULL,
          opening_hours JSONB NULL,
          amenities TEXT[] NOT NULL DEFAULT '{}',
          images TEXT[] NOT NULL DEFAULT '{}',
          rating DOUBLE PRECISION NULL CHECK (rating IS NULL OR (rating >= 0 AND rating <= 5)),
          review_count INTEGER NOT NULL DEFAULT 0,
          price_range VARCHAR(16) NULL,
          verified BOOLEAN NOT NULL DEFAULT FALSE,
          featured BOOLEAN NOT NULL DEFAULT FALSE,
          created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
          updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
        """
    )
    op.execute("CREATE INDEX IF NOT EXISTS idx_facilities_facility_type ON facilities (facility_type)")
    op.execute("CREATE INDEX IF NOT EXISTS idx_facilities_county ON facilities (county)")
    op.execute("CREATE INDEX IF NOT EXISTS idx_facilities_city ON facilities (city)")
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS waitlist (
          id UUID PRIMARY KEY DEFAULT gen_random_uuid(),
          email VARCHAR(320) NOT NULL,
          source VARCHAR(64) NOT NULL DEFAULT 'community_page',
          metadata JSONB NOT NULL DEFAULT '{}'::jsonb,
          created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
          CONSTRAINT uq_waitlist_email UNIQUE (email)
        )
        """
    )


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS waitlist")
    op.execute("DROP TABLE IF EXISTS facilities")
