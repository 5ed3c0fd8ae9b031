"""
Top‑level API router.

Aggregates the resource routers under their Portuguese path prefixes
and exposes a small index at the API root.  When a new resource is
added, include its router here.
"""

from fastapi import APIRouter, Request

from .endpoints import enrollments, events, participants

router = APIRouter()


@router.get("", tags=["info"])
async def api_index(request: Request) -> dict:
    """Describe the API and list its resources."""
    return {
        "mensagem": request.app.title,
        "versao": request.app.version,
        "endpoints": {
            "eventos": "/api/eventos",
            "participantes": "/api/participantes",
            "inscricoes": "/api/inscricoes",
        },
    }


router.include_router(events.router, prefix="/eventos", tags=["eventos"])
router.include_router(participants.router, prefix="/participantes", tags=["participantes"])
router.include_router(enrollments.router, prefix="/inscricoes", tags=["inscricoes"])
