from fastapi import APIRouter
from fastapi.responses import JSONResponse

from katas.shared import load_config

router = APIRouter()

config = load_config()


@router.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "title": config.general.title})
