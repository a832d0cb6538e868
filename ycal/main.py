from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
import logging

from ycal import __version__
from ycal.core import load_template
from ycal.routers import calendar, pages
from ycal.settings import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting ycal server...")
    # Compile the bundled template once; a broken package fails here, not per request
    load_template()
    logger.info("Calendar template compiled.")
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title="ycal — Printable Yearly Calendar",
    description=(
        "Renders a printable one-page yearly calendar as HTML, "
        "localized and optionally annotated with public holidays."
    ),
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(pages.router,    tags=["pages"])
app.include_router(calendar.router, tags=["calendar"])


@app.exception_handler(HTTPException)
async def plain_text_error(request: Request, exc: HTTPException):
    if exc.status_code >= 500:
        logger.error(f"{request.url.path} failed ({exc.status_code}): {exc.detail}")
    return PlainTextResponse(f"Error: {exc.detail}", status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def plain_text_validation_error(request: Request, exc: RequestValidationError):
    # loc is ("query", "<param>") for query-string fields
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'][1:]) or 'request'}: {err['msg']}"
        for err in exc.errors()
    )
    return PlainTextResponse(f"Error: invalid parameters: {problems}", status_code=400)


@app.get("/health", tags=["root"])
async def health():
    return {"status": "ok"}
