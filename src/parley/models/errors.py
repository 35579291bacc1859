"""
Display-only error kinds recorded by the controller after a failed round-trip.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ServerError(BaseModel):
    """The responder answered with a non-success status."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["server_error"] = "server_error"
    status_code: int

    @property
    def message(self) -> str:
        return f"Server error: {self.status_code}"


class NoResponse(BaseModel):
    """The request went out but nothing came back."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["no_response"] = "no_response"

    @property
    def message(self) -> str:
        return "Connection error: the server did not respond"


class RequestFailed(BaseModel):
    """The request could not be built or dispatched."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["request_failed"] = "request_failed"

    @property
    def message(self) -> str:
        return "Could not send the request"


ErrorKind = Annotated[Union[ServerError, NoResponse, RequestFailed], Field(discriminator="kind")]
