"""
Supabase Auth gateway - resolves bearer tokens to user ids.
Session handling itself stays with Supabase Auth.
"""

import logging
from typing import Optional
from uuid import UUID
from supabase import Client, AuthError as SupabaseAuthError
from core.interfaces.repositories import IAuthGateway
from infrastructure.database.supabase_client import get_supabase, run_sync

logger = logging.getLogger(__name__)


class SupabaseAuthGateway(IAuthGateway):
    """Validates access tokens against Supabase Auth"""

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase()

    @run_sync
    def _get_user_sync(self, access_token: str):
        return self.client.auth.get_user(access_token)

    async def get_user_id(self, access_token: str) -> Optional[UUID]:
        if not access_token:
            return None
        try:
            response = await self._get_user_sync(access_token)
        except SupabaseAuthError as e:
            logger.info(f"Rejected access token: {e}")
            return None

        user = getattr(response, "user", None) if response else None
        if not user:
            return None
        return UUID(str(user.id))
