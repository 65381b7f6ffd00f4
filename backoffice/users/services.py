from typing import List

from sqlalchemy import select

from backoffice.common.services import AppService
from backoffice.users.models import User
from backoffice.users.schemas import UserResponse


class UserService(AppService):

    async def list_users(self) -> List[UserResponse]:
        """
        List all users ordered by full name.

        Only the public columns are selected; ``password_hash`` never leaves
        the database.
        """
        stmt = (
            select(
                User.id,
                User.email,
                User.role,
                User.full_name,
                User.is_active,
                User.created_at,
                User.updated_at,
                User.supabase_user_id,
            )
            .order_by(User.full_name.asc(), User.id.asc())
        )
        result = await self._execute(stmt, "Failed to fetch users")
        return [UserResponse.model_validate(row) for row in result.all()]
