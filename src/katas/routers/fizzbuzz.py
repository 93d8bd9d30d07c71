from fastapi import APIRouter

from katas.core import fizzbuzz
from katas.models.requests import FizzBuzzRequest, FizzBuzzResponse
from katas.shared import Logger

logger = Logger(__name__).get_logger()

router = APIRouter()


@router.post("/fizzbuzz", response_model=FizzBuzzResponse)
async def fizzbuzz_labels(data: FizzBuzzRequest):
    logger.debug(data)
    return FizzBuzzResponse(bound=data.bound, labels=list(fizzbuzz(data.bound)))
