import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, ForeignKey, Text, DateTime, JSON, UniqueConstraint
from sqlalchemy.orm import relationship
from career_guide.db.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


def _uuid() -> str:
    return uuid.uuid4().hex


# ============ ПОЛЬЗОВАТЕЛИ ============

class User(Base):
    """Пользователи системы"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    full_name = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    role = Column(String, nullable=True)  # student, graduate, professional...
    interests = Column(JSON, nullable=True)  # Список интересов
    created_at = Column(DateTime(timezone=True), default=_utcnow)

    quiz_sessions = relationship("QuizSession", back_populates="user", cascade="all, delete-orphan")
    roadmaps = relationship("Roadmap", back_populates="user", cascade="all, delete-orphan")
    career_trees = relationship("CareerTree", back_populates="user", cascade="all, delete-orphan")
    saved_jobs = relationship("SavedJob", back_populates="user", cascade="all, delete-orphan")


# ============ КАРЬЕРНЫЙ ТЕСТ ============

class QuizSession(Base):
    """Сессия карьерного теста: 5 базовых ответов, 10 AI-вопросов, результаты"""
    __tablename__ = "quiz_sessions"

    id = Column(String(32), primary_key=True, default=_uuid)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    phase1_answers = Column(JSON, nullable=True)
    phase2_questions = Column(JSON, nullable=True)
    phase2_answers = Column(JSON, nullable=True)
    results = Column(JSON, nullable=True)

    created_at = Column(DateTime(timezone=True), default=_utcnow)

    user = relationship("User", back_populates="quiz_sessions")


# ============ ГЕНЕРАТОРЫ ============

class Roadmap(Base):
    """Сгенерированная дорожная карта"""
    __tablename__ = "roadmaps"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    career_goal = Column(Text, nullable=False)
    stages = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow)

    user = relationship("User", back_populates="roadmaps")


class CareerTree(Base):
    """Сгенерированное карьерное дерево"""
    __tablename__ = "career_trees"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    root_title = Column(String, nullable=False)
    form_input = Column(JSON, nullable=True)  # Исходные ответы формы
    tree_data = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow)

    user = relationship("User", back_populates="career_trees")


# ============ ВАКАНСИИ ============

class SavedJob(Base):
    """Сохранённая вакансия и статус отклика"""
    __tablename__ = "saved_jobs"
    __table_args__ = (UniqueConstraint("user_id", "job_id", name="uq_saved_jobs_user_job"),)

    id = Column(String(32), primary_key=True, default=_uuid)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    job_id = Column(String, nullable=False)  # id вакансии во внешнем источнике
    title = Column(String, nullable=False)
    company = Column(String, nullable=False)
    location = Column(String, nullable=False, default="")
    url = Column(String, nullable=False)
    source = Column(String, nullable=False, default="jsearch")
    status = Column(String, nullable=False, default="saved")  # saved, applied, interviewing, offer, rejected

    created_at = Column(DateTime(timezone=True), default=_utcnow)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    user = relationship("User", back_populates="saved_jobs")
