"""create_documents_table

Revision ID: 5b2e9c71d4a0
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '5b2e9c71d4a0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the documents table holding every collection."""
    op.create_table('documents',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('collection', sa.String(length=100), nullable=False),
        sa.Column('data', postgresql.JSONB(astext_type=sa.Text()), nullable=False,
                  server_default='{}'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False,
                  server_default=sa.text('NOW()')),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_documents_collection', 'documents', ['collection'])

    # Expression index for login/registration lookups. Deliberately not
    # UNIQUE: email uniqueness is only checked by the application.
    op.execute(
        "CREATE INDEX idx_documents_users_email ON documents ((data->>'email')) "
        "WHERE collection = 'users'"
    )


def downgrade() -> None:
    """Drop the documents table."""
    op.execute("DROP INDEX IF EXISTS idx_documents_users_email")
    op.drop_index('idx_documents_collection', table_name='documents')
    op.drop_table('documents')
