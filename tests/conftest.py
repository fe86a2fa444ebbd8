"""
Общие фикстуры: in-memory SQLite, фейковый LLM, HTTP клиент к приложению.
"""
import json
import os

# До импорта приложения: модульный engine не должен смотреть в Postgres
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ.pop("GROQ_API_KEY", None)

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine, AsyncSession
from sqlalchemy.pool import StaticPool

from career_guide.core.security import create_access_token, get_password_hash
from career_guide.db.database import Base, get_db
from career_guide.db.models import User
from career_guide.dependencies import get_llm
from career_guide.main import app
from career_guide.quiz.questions import PHASE1_QUESTIONS

PHASE1_VALUES = ["bachelors", "hybrid", "technology", "analytical", "learning"]


class FakeLLM:
    """Отдаёт заготовленные ответы по очереди и запоминает вызовы"""

    def __init__(self, responses=None, error=None):
        self.responses = list(responses or [])
        self.error = error
        self.calls = []

    def queue(self, *responses):
        self.responses.extend(responses)

    async def complete(self, system, user, *, temperature=0.5, max_tokens=None):
        self.calls.append({"system": system, "user": user, "temperature": temperature})
        if self.error is not None:
            raise self.error
        return self.responses.pop(0)


def make_questions(count: int = 10) -> list:
    return [
        {
            "question": f"Follow-up question {i + 1}?",
            "type": "single",
            "options": [
                {"value": f"opt_{i}_{j}", "label": f"Option {j}"} for j in range(4)
            ],
        }
        for i in range(count)
    ]


def make_results() -> list:
    return [
        {
            "id": "data_scientist",
            "title": "Data Scientist",
            "summary": "Turns data into decisions.",
            "salaryMin": 95000,
            "salaryMax": 160000,
            "education": "Bachelor's in a quantitative field",
            "skills": ["Python", "Statistics", "SQL"],
            "matchScore": 92,
        },
        {
            "id": "ml_engineer",
            "title": "Machine Learning Engineer",
            "summary": "Ships models to production.",
            "salaryMin": 110000,
            "salaryMax": 180000,
            "education": "Bachelor's in Computer Science",
            "skills": ["Python", "MLOps", "Deep Learning"],
            "matchScore": 85,
        },
        {
            "id": "analyst",
            "title": "Business Analyst",
            "summary": "Bridges business and data.",
            "salaryMin": 65000,
            "salaryMax": 110000,
            "education": "Bachelor's Degree",
            "skills": ["Excel", "Communication", "SQL"],
            "matchScore": 74,
        },
    ]


def as_llm_text(data) -> str:
    return json.dumps(data)


@pytest.fixture
def llm():
    return FakeLLM()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory, llm):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_llm] = lambda: llm

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http:
        yield http

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def user(db):
    user = User(
        email="student@example.com",
        password_hash=get_password_hash("student123"),
        full_name="Demo Student",
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


@pytest.fixture
def auth_headers(user):
    token = create_access_token({"sub": user.email})
    return {"Authorization": f"Bearer {token}"}


def phase1_payload(values=PHASE1_VALUES) -> list:
    return [
        {"questionIndex": i, "question": q.question, "answer": value}
        for i, (q, value) in enumerate(zip(PHASE1_QUESTIONS, values))
    ]


def all_answers_payload() -> list:
    answers = phase1_payload()
    answers.extend(
        {"questionIndex": 5 + i, "question": f"Follow-up question {i + 1}?", "answer": "Option 1"}
        for i in range(10)
    )
    return answers
