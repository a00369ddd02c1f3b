# backend/emailql/routers/explorer.py
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter()


@router.get("/graphiql", response_class=HTMLResponse)
def graphiql(request: Request):
    # fixed page, read as-is; read errors surface as a 500
    page = Path(request.app.state.settings.EXPLORER_PAGE).read_text(encoding="utf-8")
    return HTMLResponse(page)
