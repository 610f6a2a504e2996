"""Health-check response contract."""

from pydantic import BaseModel, ConfigDict


class PingResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str
    service: str = "networth"
