"""
Client factory for the Supabase identity/database provider.

Two clients with different capabilities exist side by side:
- AnonClient: a bare Supabase Auth client built with the anon key, used only
  for end-user auth flows
- AdminClient: a full Supabase client built with the service role key, used
  for data-plane access where this service is authoritative over row
  ownership (bypasses RLS)

They are distinct types so that an auth flow cannot be handed the privileged
client by accident.

The anon client is shared by every request, so it never refreshes or persists
sessions and has no PostgREST headers that a sign-in could rewrite.
"""

from typing import NewType

from supabase import AsyncClient, acreate_client
from supabase_auth import AsyncGoTrueClient

from .config import Settings

AnonClient = NewType("AnonClient", AsyncGoTrueClient)
AdminClient = NewType("AdminClient", AsyncClient)

AUTH_PATH = "/auth/v1"


async def create_anon_client(settings: Settings) -> AnonClient:
    """
    Create the Supabase Auth client used for sign-up and sign-in.

    Args:
        settings: Loaded application settings

    Returns:
        Async auth client configured with the anon key
    """
    client = AsyncGoTrueClient(
        url=f"{settings.identity_url.rstrip('/')}{AUTH_PATH}",
        headers={
            "apiKey": settings.identity_anon_key,
            "Authorization": f"Bearer {settings.identity_anon_key}",
        },
        auto_refresh_token=False,
        persist_session=False,
    )
    return AnonClient(client)


async def create_admin_client(settings: Settings) -> AdminClient:
    """
    Create the Supabase client used for proposal reads and writes.

    Args:
        settings: Loaded application settings

    Returns:
        Async Supabase client configured with the service role key
    """
    client = await acreate_client(settings.identity_url, settings.identity_admin_key)
    return AdminClient(client)


async def close_anon_client(client: AnonClient) -> None:
    """Release the auth client's HTTP connection pool."""
    await client.close()


async def close_admin_client(client: AdminClient) -> None:
    """Release the PostgREST and auth connection pools of the admin client."""
    await client.postgrest.aclose()
    await client.auth.close()
