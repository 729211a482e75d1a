from typing import Literal

from pydantic import BaseModel, ConfigDict


class HealthStatus(BaseModel):
    """Liveness payload; ``status`` is always ``"ok"`` while the process answers."""

    model_config = ConfigDict(frozen=True)

    status: Literal["ok"] = "ok"
