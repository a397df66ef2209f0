# qa_forum/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qa_forum.config import settings
from qa_forum.database import init_db
from qa_forum.error_handlers import register_error_handlers
from qa_forum.logger import setup_logging
from qa_forum.routes.answers import router as answers_router
from qa_forum.routes.auth import router as auth_router
from qa_forum.routes.questions import router as questions_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Q&A Forum API started (%s)", settings.ENVIRONMENT)
    yield
    logger.info("Q&A Forum API shutting down")


def create_app() -> FastAPI:
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    app = FastAPI(title="Q&A Forum API", version="1.0.0", lifespan=lifespan)

    # Must precede CORS: middleware added later wraps the earlier ones
    register_error_handlers(app)

    origins = ["http://localhost:5173", "http://127.0.0.1:5173"]
    if settings.FRONTEND_URL:
        origins.append(settings.FRONTEND_URL)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth_router)
    app.include_router(questions_router)
    app.include_router(answers_router)

    @app.get("/")
    def read_root():
        return {"message": "Q&A Forum API is running"}

    return app


app = create_app()


def run():
    import uvicorn

    uvicorn.run("qa_forum.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
