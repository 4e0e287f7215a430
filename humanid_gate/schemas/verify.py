from pydantic import BaseModel


class SbtHoldingOut(BaseModel):
    address: str
    holdsSBT: bool


class VerifyErrorOut(BaseModel):
    error: str
