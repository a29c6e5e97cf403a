"""Base classes for GitHub wire models."""

from pydantic import BaseModel, ConfigDict


class GitHubModel(BaseModel):
    """A record returned by the API.

    Unknown fields are ignored and every field defaults to None, so a partial
    payload still decodes and a missing value never reads as "" or 0.
    """

    model_config = ConfigDict(extra="ignore")


class RequestModel(BaseModel):
    """A request payload. Fields left as None are not sent."""

    model_config = ConfigDict(extra="forbid")

    def to_body(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)
