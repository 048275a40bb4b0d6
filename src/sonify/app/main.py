import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from ..mood import config
from . import schemas, services

logger = logging.getLogger(__name__)

ERROR_BOT_MESSAGE = "Sorry, something went wrong with mood detection."

router = APIRouter()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Drop the shared HTTP session so nothing outlives the app
    config.reset_classifier()


@router.get("/health")
def health_check():
    """Reports that the Sonify API process is up and answering."""
    return {"status": "healthy", "service": "sonify"}


@router.post(
    "/chat",
    response_model=schemas.ChatResponse,
    responses={500: {"model": schemas.ErrorResponse}},
)
def chat(request: schemas.ChatRequest):
    """
    Endpoint to get mood-matched playlists for a short text query.
    """
    try:
        return services.get_chat_reply(request.query)
    except Exception as e:
        logger.exception(f"Error handling chat query: {e}")
        error = schemas.ErrorResponse(
            bot_message=ERROR_BOT_MESSAGE,
            error=str(e) if config.DEBUG else "Internal server error",
        )
        return JSONResponse(status_code=500, content=error.model_dump(by_alias=True))


def create_app(static_dir: Optional[str] = None) -> FastAPI:
    """
    Builds the API app. Front-end assets from static_dir (SONIFY_STATIC_DIR by
    default) are mounted at "/" behind the API routes, if the directory exists.
    """
    static_dir = static_dir or config.STATIC_DIR
    app = FastAPI(title="Sonify API", lifespan=lifespan)
    app.include_router(router)
    if os.path.isdir(static_dir):
        logger.info(f"Serving front-end from {static_dir}")
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    return app


app = create_app()


def run() -> None:
    """Console entry point: configure logging and serve the app with uvicorn."""
    config.configure_logging_from_env()
    logger.info(f"Sonify running on http://localhost:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
