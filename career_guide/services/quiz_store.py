"""
Хранилище сессий карьерного теста

Сервис теста видит только два метода (create_session / update_session),
поэтому в тестах вместо БД подставляется фейк с тем же интерфейсом.
Запись в БД - best-effort: ошибки логируются и возвращаются в PersistResult,
но никогда не пробрасываются в ответ пользователю.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from career_guide.db.models import QuizSession

logger = logging.getLogger(__name__)


class SessionNotFoundError(LookupError):
    pass


@dataclass
class PersistResult:
    """Итог записи в БД"""
    ok: bool
    session_id: Optional[str] = None
    error: Optional[str] = None


class QuizSessionStore(ABC):

    @abstractmethod
    async def create_session(self, user_id: int, **fields: Any) -> str:
        """Создать сессию, вернуть её id"""

    @abstractmethod
    async def update_session(self, session_id: str, user_id: int, **fields: Any) -> str:
        """Обновить существующую сессию пользователя, вернуть её id"""


class SqlQuizSessionStore(QuizSessionStore):
    """Реализация на SQLAlchemy (AsyncSession из запроса)"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_session(self, user_id: int, **fields: Any) -> str:
        session = QuizSession(user_id=user_id, **fields)
        self.db.add(session)
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return session.id

    async def update_session(self, session_id: str, user_id: int, **fields: Any) -> str:
        session = await self.db.get(QuizSession, session_id)
        # Чужую сессию не трогаем
        if session is None or session.user_id != user_id:
            raise SessionNotFoundError(f"Quiz session {session_id} not found")

        for key, value in fields.items():
            setattr(session, key, value)
        try:
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return session.id


async def persist_safely(operation: Awaitable[str]) -> PersistResult:
    """Дождаться записи в хранилище, не выпуская ошибку наружу"""
    try:
        session_id = await operation
    except Exception as e:
        logger.exception("Failed to persist quiz session")
        return PersistResult(ok=False, error=str(e) or e.__class__.__name__)
    return PersistResult(ok=True, session_id=session_id)
