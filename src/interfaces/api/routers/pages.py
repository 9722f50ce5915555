"""Pages router - landing page."""
from fastapi import APIRouter, Request
from fastapi.responses import FileResponse, PlainTextResponse, Response

router = APIRouter(tags=["pages"])


@router.get("/", response_class=FileResponse)
async def index(request: Request) -> Response:
    """Serve the landing page when present."""
    index_page = request.app.state.settings.get_index_page()
    if not index_page.is_file():
        return PlainTextResponse("Landing page not found. Add public/index.html.", status_code=404)
    return FileResponse(index_page, media_type="text/html")
