# career_guide/routers/profile.py
import re

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from career_guide.core.errors import error_response
from career_guide.db.database import get_db
from career_guide.db.models import User
from career_guide.dependencies import get_current_user
from career_guide.schemas.user import ProfileResponse, ProfileUpdate

router = APIRouter(prefix="/api/profile", tags=["Profile"])

PHONE_PATTERN = re.compile(r"^\+?\d{7,15}$")
PHONE_SEPARATORS = re.compile(r"[\s\-()]")


def is_valid_phone(phone: str) -> bool:
    return bool(PHONE_PATTERN.match(PHONE_SEPARATORS.sub("", phone)))


@router.get("", response_model=ProfileResponse)
async def get_profile(current_user: User = Depends(get_current_user)):
    return current_user


@router.put("", response_model=ProfileResponse)
async def update_profile(
    update: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Частичное обновление: меняем только переданные поля"""
    if update.phone and not is_valid_phone(update.phone):
        return error_response(400, "Please enter a valid phone number")

    fields = update.model_dump(exclude_unset=True)
    if "name" in fields:
        current_user.full_name = (fields["name"] or "").strip() or None
    if "phone" in fields:
        current_user.phone = (fields["phone"] or "").strip() or None
    if "role" in fields:
        current_user.role = fields["role"] or None
    if "interests" in fields:
        current_user.interests = fields["interests"]

    await db.commit()
    await db.refresh(current_user)
    return current_user
