"""
Route definitions for the catalogue REST API.

Endpoints under /api/catalog:
- GET  /categories                     : the home rows, without artwork
- GET  /categories/{category_id}/titles : one row, optionally with artwork
- GET  /titles                         : prefix search, optionally with artwork

These mirror the GraphQL queries for clients that do not speak GraphQL.
Artwork is opt-in here because every title costs one slow generation.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, Request

from .schemas import Category, Title
from .service import LolomoService

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


def get_service(request: Request) -> LolomoService:
    """Return the process-wide service built by ``create_app``."""
    return request.app.state.service


@router.get("/categories", response_model=List[Category])
def list_categories(service: LolomoService = Depends(get_service)) -> List[Category]:
    return service.list_categories()


@router.get("/categories/{category_id}/titles", response_model=List[Title])
async def category_titles(
    category_id: int,
    artwork: bool = Query(default=False, description="Resolve artwork ids"),
    service: LolomoService = Depends(get_service),
) -> List[Title]:
    """Return the titles of one category.

    Unknown categories yield an empty list rather than a 404, matching
    the catalogue's lookup contract.
    """
    titles = service.category_titles(category_id)
    if artwork:
        titles = await service.enrich(titles)
    return titles


@router.get("/titles", response_model=List[Title])
async def search_titles(
    q: str = Query(default="", description="Case-sensitive title prefix"),
    artwork: bool = Query(default=False, description="Resolve artwork ids"),
    service: LolomoService = Depends(get_service),
) -> List[Title]:
    titles = service.search(q)
    if artwork:
        titles = await service.enrich(titles)
    return titles
