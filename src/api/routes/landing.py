from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

LANDING_PAGE = Path(__file__).resolve().parents[2] / "static" / "index.html"

router = APIRouter(tags=["landing"])

@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def landing_page() -> HTMLResponse:
    return HTMLResponse(LANDING_PAGE.read_text(encoding="utf-8"))
