from pydantic import BaseModel, Field

from katas.shared import load_config

config = load_config()


class FizzBuzzRequest(BaseModel):
    bound: int = Field(
        default=config.fizzbuzz.default_bound, le=config.fizzbuzz.max_bound
    )


class FizzBuzzResponse(BaseModel):
    bound: int
    labels: list[str]
