"""Server-rendered HTML pages."""
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.core.constants import PAGE_TITLE
from app.core.store import UserStore, get_store

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATE_DIR))

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home_page(request: Request, store: UserStore = Depends(get_store)):
    return templates.TemplateResponse(
        request,
        "index.html",
        {"title": PAGE_TITLE, "users": store.all()},
    )
