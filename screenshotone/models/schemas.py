"""
Pydantic Models and Schemas
===========================

Data models shared by the client components.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """API credentials, fixed for the lifetime of a client."""

    model_config = ConfigDict(frozen=True)

    access_key: str = Field(..., description="Access key identifying the caller")
    secret_key: Optional[str] = Field(
        None, repr=False, description="Secret key used to sign request URLs"
    )

    @property
    def can_sign(self) -> bool:
        """Whether a signed URL can be produced."""
        return bool(self.secret_key)

