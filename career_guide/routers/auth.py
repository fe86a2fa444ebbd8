# career_guide/routers/auth.py
import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from career_guide.core.config import settings
from career_guide.core.errors import error_response
from career_guide.core.security import create_access_token, get_password_hash, verify_password
from career_guide.db.database import get_db
from career_guide.db.models import User
from career_guide.dependencies import get_current_user
from career_guide.schemas.user import ProfileResponse, SignupRequest, SignupResponse, Token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])

MIN_PASSWORD_LENGTH = 8


@router.post("/signup", response_model=SignupResponse)
async def signup(user_data: SignupRequest, db: AsyncSession = Depends(get_db)):
    """Регистрация нового пользователя"""
    email = (user_data.email or "").strip().lower()
    if not email or not user_data.password:
        return error_response(400, "Email and password are required")
    if len(user_data.password) < MIN_PASSWORD_LENGTH:
        return error_response(400, f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    # Проверяем, есть ли такой email
    result = await db.execute(select(User).where(User.email == email))
    if result.scalar_one_or_none():
        return error_response(409, "An account with this email already exists")

    new_user = User(
        email=email,
        password_hash=get_password_hash(user_data.password),
        full_name=(user_data.name or "").strip() or None,
        role=user_data.role or None,
        interests=user_data.interests,
    )
    db.add(new_user)
    await db.commit()
    await db.refresh(new_user)
    logger.info("User %s signed up", new_user.id)

    return SignupResponse(id=new_user.id, email=new_user.email, name=new_user.full_name)


@router.post("/login", response_model=Token)
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: AsyncSession = Depends(get_db)
):
    """Вход в систему"""
    result = await db.execute(select(User).where(User.email == form_data.username.strip().lower()))
    user = result.scalar_one_or_none()

    if not user or not verify_password(form_data.password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(
        data={"sub": user.email},
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/me", response_model=ProfileResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    """Текущий пользователь"""
    return current_user
