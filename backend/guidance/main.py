import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from guidance import __version__
from guidance.config import settings
from guidance.routers import guidance as guidance_router
from guidance.schemas.guidance import ValidationErrorBody
from guidance.services.validation import first_error

logger = logging.getLogger("guidance")


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    try:
        from guidance.database import init_db
        init_db()
        logger.info("Search log database ready at %s", settings.db_path)
    except Exception as exc:
        # Search logging is best effort, so the API still starts without it.
        logger.error("Could not initialise search log database: %s", exc)
    yield


app = FastAPI(
    title="Career Guidance API",
    description="Job, career and major suggestions with an offline fallback",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    message, field = first_error(exc.errors())
    return JSONResponse(
        status_code=400,
        content=ValidationErrorBody(message=message, field=field).model_dump(),
    )


app.include_router(guidance_router.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}


def run():
    import uvicorn

    uvicorn.run("guidance.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
