import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

import studyhub.models  # noqa: F401  регистрирует таблицы в Base.metadata
from studyhub.api.routes import cards, decks
from studyhub.core.config import settings
from studyhub.core.logging import configure_logging
from studyhub.db.base import Base
from studyhub.db.session import engine
from studyhub.domain.review import InvalidReviewInput

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    Base.metadata.create_all(bind=engine)
    logger.info("studyhub started, database=%s", engine.url.render_as_string(hide_password=True))
    yield


app = FastAPI(title="StudyHub Flashcards API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(decks.router, prefix="/api/decks", tags=["decks"])
app.include_router(cards.router, prefix="/api/cards", tags=["cards"])


@app.exception_handler(InvalidReviewInput)
async def invalid_review_input_handler(_: Request, exc: InvalidReviewInput):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/health")
def health_check():
    return {"status": "ok"}
