"""Emails and keys of a user account."""

from datetime import datetime

from .base import GitHubModel, RequestModel


class UserEmail(GitHubModel):
    email: str | None = None
    primary: bool | None = None
    verified: bool | None = None
    visibility: str | None = None


class SshKey(GitHubModel):
    id: int | None = None
    key: str | None = None
    url: str | None = None
    title: str | None = None
    verified: bool | None = None
    created_at: datetime | None = None
    read_only: bool | None = None


class GpgEmail(GitHubModel):
    email: str | None = None
    verified: bool | None = None


class GpgKey(GitHubModel):
    id: int | None = None
    primary_key_id: int | None = None
    key_id: str | None = None
    public_key: str | None = None
    emails: list[GpgEmail] | None = None
    can_sign: bool | None = None
    can_encrypt_comms: bool | None = None
    can_encrypt_storage: bool | None = None
    can_certify: bool | None = None
    created_at: datetime | None = None
    expires_at: datetime | None = None


class CreateSshKeyRequest(RequestModel):
    title: str
    key: str
