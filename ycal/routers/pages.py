from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ycal.services.data_loader import list_themes

router = APIRouter()

SHELL_HTML_PATH = Path(__file__).resolve().parent.parent / "templates" / "shell.html"

# Bundled with the package and never changes at runtime
with open(SHELL_HTML_PATH, "r", encoding="utf-8") as _f:
    SHELL_HTML = _f.read()


@router.get("/", summary="Calendar form page", response_class=HTMLResponse)
async def shell_page():
    """Form for choosing the calendar parameters, with a live preview frame."""
    return HTMLResponse(content=SHELL_HTML)


@router.get("/themes", summary="Bundled theme names")
async def get_themes():
    return list_themes()
