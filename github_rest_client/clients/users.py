"""User endpoints: profiles, followers, emails and keys."""

from ..dispatcher import Dispatcher
from ..models import CreateSshKeyRequest, GpgKey, SshKey, User, UserEmail
from ..options import Pagination, UserListOptions
from ..query import with_query
from ..response import ApiResponse


class UsersClient:
    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher

    async def get_authenticated(self) -> ApiResponse[User]:
        return await self._dispatcher.send("GET", "/user", User)

    async def get(self, username: str) -> ApiResponse[User]:
        return await self._dispatcher.send("GET", f"/users/{username}", User)

    async def list_all(self, options: UserListOptions | None = None) -> ApiResponse[list[User]]:
        """List all users in sign-up order, starting after ``options.since`` (a user id)."""
        options = options or UserListOptions()
        path = with_query("/users", options.to_params())
        return await self._dispatcher.send("GET", path, list[User])

    async def list_followers(
        self, username: str, pagination: Pagination | None = None
    ) -> ApiResponse[list[User]]:
        pagination = pagination or Pagination()
        path = with_query(f"/users/{username}/followers", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[User])

    async def list_following(
        self, username: str, pagination: Pagination | None = None
    ) -> ApiResponse[list[User]]:
        pagination = pagination or Pagination()
        path = with_query(f"/users/{username}/following", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[User])

    async def check_following(self, username: str, target_user: str) -> ApiResponse[str]:
        """204 if ``username`` follows ``target_user``, 404 if not."""
        return await self._dispatcher.send_text("GET", f"/users/{username}/following/{target_user}")

    async def list_emails(self, pagination: Pagination | None = None) -> ApiResponse[list[UserEmail]]:
        pagination = pagination or Pagination()
        path = with_query("/user/emails", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[UserEmail])

    async def list_ssh_keys_for_user(
        self, username: str, pagination: Pagination | None = None
    ) -> ApiResponse[list[SshKey]]:
        pagination = pagination or Pagination()
        path = with_query(f"/users/{username}/keys", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[SshKey])

    async def list_my_ssh_keys(self, pagination: Pagination | None = None) -> ApiResponse[list[SshKey]]:
        pagination = pagination or Pagination()
        path = with_query("/user/keys", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[SshKey])

    async def create_ssh_key(self, request: CreateSshKeyRequest) -> ApiResponse[SshKey]:
        return await self._dispatcher.send("POST", "/user/keys", SshKey, body=request)

    async def delete_ssh_key(self, key_id: int) -> ApiResponse[str]:
        return await self._dispatcher.send_text("DELETE", f"/user/keys/{key_id}")

    async def list_gpg_keys_for_user(
        self, username: str, pagination: Pagination | None = None
    ) -> ApiResponse[list[GpgKey]]:
        pagination = pagination or Pagination()
        path = with_query(f"/users/{username}/gpg_keys", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[GpgKey])

    async def list_my_gpg_keys(self, pagination: Pagination | None = None) -> ApiResponse[list[GpgKey]]:
        pagination = pagination or Pagination()
        path = with_query("/user/gpg_keys", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[GpgKey])
