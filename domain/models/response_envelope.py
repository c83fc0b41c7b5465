from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ResponseEnvelope(BaseModel):
    """
    Standard wrapper returned by the Country API for every call.

    ``status`` arrives either as a number (404) or as a status name
    (``"BAD_REQUEST"``) depending on how the server serializes it; both are
    kept verbatim for display.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    if_success: bool = Field(..., alias="ifSuccess")
    info_message: Optional[str] = Field(default=None, alias="infoMessage")
    error_message: Optional[str] = Field(default=None, alias="errorMessage")
    status: Optional[Union[int, str]] = None
    data: Any = None

    @property
    def message(self) -> Optional[str]:
        """The message that is meaningful for this envelope."""
        return self.info_message if self.if_success else self.error_message
