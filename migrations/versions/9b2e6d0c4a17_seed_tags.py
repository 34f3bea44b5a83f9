"""seed_tags

Revision ID: 9b2e6d0c4a17
Revises: 3f1c9a7d2e4b
Create Date: 2026-10-17 10:31:02.774190

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9b2e6d0c4a17"
down_revision: Union[str, Sequence[str], None] = "3f1c9a7d2e4b"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TAGS = [
    ("javascript", "For questions about JavaScript programming language"),
    ("react", "Questions about React library"),
    ("node.js", "For Node.js questions"),
    ("css", "Questions about CSS"),
    ("html", "HTML related questions"),
    ("typescript", "TypeScript language questions"),
    ("python", "Questions about Python programming"),
    ("java", "Java programming language questions"),
]


def upgrade() -> None:
    """Seed the initial curated tags."""
    tags_table = sa.table(
        "tags",
        sa.column("name", sa.String),
        sa.column("description", sa.String),
    )

    op.bulk_insert(
        tags_table,
        [{"name": name, "description": description} for name, description in TAGS],
    )


def downgrade() -> None:
    """Remove seeded tags."""
    names = ", ".join(f"'{name}'" for name, _ in TAGS)
    op.execute(f"DELETE FROM tags WHERE name IN ({names})")
