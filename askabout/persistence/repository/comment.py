"""PostgreSQL comment repository."""

from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from askabout.domain.model import Comment
from askabout.domain.repository import CommentRepository
from askabout.domain.value import CommentId
from askabout.persistence.mappers import comment_to_dict, row_to_comment
from askabout.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """Reads comments for subject resolution."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        result = await self.session.execute(
            select(comments_table).where(comments_table.c.id == comment_id)
        )
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def save(self, comment: Comment) -> Comment:
        await self.session.execute(
            insert(comments_table).values(**comment_to_dict(comment))
        )
        await self.session.flush()
        return comment
