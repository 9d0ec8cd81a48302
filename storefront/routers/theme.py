"""Theme Router - dark/light toggle stored in a cookie."""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront.theme import THEME_COOKIE, THEME_COOKIE_MAX_AGE, toggle_theme
from .deps import get_theme

router = APIRouter(tags=["theme"])


@router.post("/theme/toggle")
async def toggle(current: str = Depends(get_theme)):
    theme = toggle_theme(current)
    response = JSONResponse({"theme": theme})
    response.set_cookie(THEME_COOKIE, theme, max_age=THEME_COOKIE_MAX_AGE, samesite="lax")
    return response
