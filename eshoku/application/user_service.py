import logging

from eshoku.application.errors import UserAlreadyExistsError, UserNotFoundError
from eshoku.application.ports import UserStore
from eshoku.domain.models import Gender, Identity, UserProfile

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, store: UserStore):
        self._store = store

    async def register(
        self,
        identity: Identity,
        username: str,
        display_name: str,
        date_of_birth: str,
        gender: Gender,
    ) -> UserProfile:
        user_id = await self._store.next_user_id()
        if not await self._store.claim_sub(identity.sub, user_id):
            raise UserAlreadyExistsError(identity.sub)
        profile = UserProfile(
            id=user_id,
            sub=identity.sub,
            username=username,
            display_name=display_name,
            email=identity.email,
            date_of_birth=date_of_birth,
            gender=gender,
        )
        try:
            await self._store.save_user(profile)
        except Exception:
            await self._store.release_sub(identity.sub, user_id)
            raise
        logger.info("registered user %s as %r", user_id, username)
        return profile

    async def get_by_sub(self, sub: str) -> UserProfile:
        user_id = await self._store.get_user_id_by_sub(sub)
        if user_id is None:
            raise UserNotFoundError(sub)
        profile = await self._store.get_user(user_id)
        if profile is None:
            raise UserNotFoundError(sub)
        return profile

    async def exists(self, sub: str) -> bool:
        return await self._store.get_user_id_by_sub(sub) is not None
