from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
import jwt
from jwt.exceptions import PyJWTError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from career_guide.core.config import settings
from career_guide.db.database import get_db
from career_guide.db.models import User
from career_guide.services.llm_client import LLMClient, get_llm_client

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")
# Для маршрутов, где авторизация не обязательна (тест, генераторы)
optional_oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


async def _user_from_token(token: str, db: AsyncSession) -> Optional[User]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except PyJWTError:
        return None

    email = payload.get("sub")
    if email is None:
        return None

    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db)
) -> User:
    """Получить текущего пользователя из JWT токена"""
    user = await _user_from_token(token, db)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


async def get_optional_user(
    token: Optional[str] = Depends(optional_oauth2_scheme),
    db: AsyncSession = Depends(get_db)
) -> Optional[User]:
    """Пользователь, если передан валидный токен, иначе None"""
    if not token:
        return None
    return await _user_from_token(token, db)


def get_llm() -> LLMClient:
    """LLM клиент (подменяется в тестах через dependency_overrides)"""
    return get_llm_client()
