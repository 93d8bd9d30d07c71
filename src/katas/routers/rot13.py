from fastapi import APIRouter

from katas.core import rot13
from katas.models.requests import Rot13Request, Rot13Response
from katas.shared import Logger

logger = Logger(__name__).get_logger()

router = APIRouter()


@router.post("/rot13", response_model=Rot13Response)
async def rot13_text(data: Rot13Request):
    """
    input: text
    ===============
    rotate ASCII letters by 13
    pass everything else through
    """
    logger.debug(f"rot13 on {len(data.text)} characters")
    return Rot13Response(text=rot13(data.text))
