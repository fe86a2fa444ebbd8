"""
Скрипт для создания тестовых пользователей
Запуск: python -m scripts.seed_data
"""
import asyncio
import sys
import os

# Добавляем корневую папку проекта в sys.path, чтобы Python видел пакет career_guide
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.exc import IntegrityError

from career_guide.db.database import AsyncSessionLocal
from career_guide.db.models import User
from career_guide.core.security import get_password_hash


async def create_users():
    """Создать тестовых пользователей"""

    async with AsyncSessionLocal() as db:
        print("🚀 Начинаю создание пользователей...")

        users = [
            User(
                email="student@example.com",
                password_hash=get_password_hash("student123"),
                full_name="Demo Student",
                role="student",
                interests=["technology", "design"]
            ),
            User(
                email="graduate@example.com",
                password_hash=get_password_hash("graduate123"),
                full_name="Demo Graduate",
                role="graduate",
                interests=["business"]
            )
        ]

        try:
            db.add_all(users)
            await db.commit()

            print("✅ Пользователи успешно созданы:")
            print("   1. student@example.com  (пароль: student123)")
            print("   2. graduate@example.com (пароль: graduate123)")

        except IntegrityError:
            # Пользователи с таким email уже есть
            await db.rollback()
            print("⚠️ Ошибка: Пользователи с таким email уже существуют.")


if __name__ == "__main__":
    if sys.platform == "win32":
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

    asyncio.run(create_users())
