from pydantic import BaseModel, Field


class PrincipalOut(BaseModel):
    principal_id: str = Field(..., description="The verified principal id")


class ReachabilityOut(BaseModel):
    reachable: bool
