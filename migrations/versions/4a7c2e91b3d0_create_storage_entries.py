"""create storage entries

Revision ID: 4a7c2e91b3d0
Revises: 
Create Date: 2026-10-17 14:20:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4a7c2e91b3d0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('storage_entries'):
        op.create_table(
            'storage_entries',
            sa.Column('key', sa.String(length=320), primary_key=True),
            sa.Column('value', sa.Text(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), nullable=False),
        )


def downgrade():
    op.drop_table('storage_entries')
