from fastapi import APIRouter
from fastapi.responses import JSONResponse

from mcdowell import __version__

router = APIRouter()


@router.get("/health", name="healthCheck")
async def health():
    """Health check endpoint"""
    return JSONResponse({"botVersion": __version__})
