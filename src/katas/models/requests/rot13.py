from pydantic import BaseModel


class Rot13Request(BaseModel):
    text: str


class Rot13Response(BaseModel):
    text: str
