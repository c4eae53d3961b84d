"""Base model shared by result and report data structures."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model that drops keys it does not declare when loading."""

    model_config = ConfigDict(frozen=True, extra="ignore")
