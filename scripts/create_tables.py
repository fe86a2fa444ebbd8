"""
Создать таблицы без alembic (локальная SQLite разработка)
Запуск: python -m scripts.create_tables
"""
import asyncio
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from career_guide.db.database import Base, engine
from career_guide.db import models  # noqa: F401


async def create_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()
    print("✅ Таблицы созданы")


if __name__ == "__main__":
    asyncio.run(create_tables())
