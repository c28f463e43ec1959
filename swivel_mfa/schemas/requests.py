from pydantic import BaseModel, Field


class SwivelTokenIn(BaseModel):
    # blank tokens are rejected by the verification itself
    token: str = Field(..., description="The one-time code", max_length=64)
