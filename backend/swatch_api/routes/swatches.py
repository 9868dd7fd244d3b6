# swatch_api/routes/swatches.py

from typing import Optional
import logging

from fastapi import APIRouter, HTTPException, Request, Response

from swatch.renderer import render_swatch_svg
from swatch_api.services.params import build_swatch_request, collect_params

logger = logging.getLogger(__name__)

router = APIRouter()

SVG_MEDIA_TYPE = "image/svg+xml"
# The swatch URL is embedded as an image source, so any verb gets the same answer
SWATCH_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _render(request: Request, path_color: Optional[str] = None) -> Response:
    try:
        params = collect_params(request.query_params)
        if path_color is not None:
            params["color"] = [path_color]

        swatch = build_swatch_request(params)
        box = swatch.box()
        logger.debug(
            "Rendering %s swatch color=%s size=%s text=%r -> %r",
            swatch.style, swatch.color, swatch.size, swatch.text, box,
        )
        svg = render_swatch_svg(swatch.color, swatch.style, swatch.text_color, box)
        return Response(content=svg, media_type=SVG_MEDIA_TYPE)

    except Exception as e:
        logger.exception("Unexpected error while rendering swatch for %s", request.url)
        raise HTTPException(status_code=500, detail=f"An internal server error occurred: {str(e)}")


@router.api_route("/api", methods=SWATCH_METHODS, response_class=Response)
def swatch_from_query(request: Request):
    return _render(request)


@router.api_route("/api/{color}", methods=SWATCH_METHODS, response_class=Response)
def swatch_from_path(color: str, request: Request):
    return _render(request, path_color=color)
