from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from api.routes.exception import handle_exceptions

INDEX_PATH = Path(__file__).resolve().parent.parent / "static" / "index.html"

router = APIRouter(tags=["UI"], include_in_schema=False)


@lru_cache(maxsize=1)
def _index_html() -> str:
    return INDEX_PATH.read_text(encoding="utf-8")


@router.get("/", response_class=HTMLResponse)
@router.get("/index.html", response_class=HTMLResponse)
@handle_exceptions
async def index() -> HTMLResponse:
    return HTMLResponse(_index_html())
