"""Wake request/response schemas."""

from pydantic import BaseModel, StrictStr


class WakeRequest(BaseModel):
    """Inbound body: ``{"target": "aa:bb:cc:dd:ee:ff"}``."""
    target: StrictStr


class WakeResult(BaseModel):
    """Outcome of one pipeline run."""
    status: str = "sent"
    status_code: int = 200
    target: str | None = None
    destination: str | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    def body(self) -> dict:
        """Response body (status code travels separately)."""
        return self.model_dump(exclude={"status_code"}, exclude_none=True)
