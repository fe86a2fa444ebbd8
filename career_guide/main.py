# career_guide/main.py
import logging
import sys
import asyncio

import uvicorn
from fastapi import FastAPI
from starlette.exceptions import HTTPException
from fastapi.middleware.cors import CORSMiddleware

if sys.platform == "win32":
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

from career_guide.core.config import settings
from career_guide.core.errors import error_response
from career_guide.core.logging_config import setup_logging
from career_guide.routers import auth, career_quiz, career_tree, profile, roadmap, saved_jobs

setup_logging()
logger = logging.getLogger(__name__)

VERSION = "1.0.0"

app = FastAPI(
    title="Career Guide API",
    description="AI career quiz, roadmaps and career trees",
    version=VERSION
)

# CORS настройки
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc: HTTPException):
    # Все ошибки в одном формате {"error": ...}
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


# Подключаем роутеры
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(career_quiz.router)
app.include_router(roadmap.router)
app.include_router(career_tree.router)
app.include_router(saved_jobs.router)


@app.get("/")
async def root():
    return {
        "status": "ok",
        "message": f"Career Guide API v{VERSION}",
        "features": [
            "Two-phase AI career quiz",
            "AI career roadmaps",
            "Career trees",
            "Quiz history",
            "Saved jobs and application tracking"
        ],
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": VERSION, "llm_configured": settings.llm_configured}


def run():
    uvicorn.run("career_guide.main:app", host="0.0.0.0", port=8080, reload=True)


if __name__ == "__main__":
    run()
