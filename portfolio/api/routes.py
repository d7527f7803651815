"""
HTTP routes for the portfolio server.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from portfolio.render import render_page

router = APIRouter()


# =============================================================================
# Page
# =============================================================================

@router.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
async def index():
    """Render the portfolio page."""
    return HTMLResponse(render_page())
