from typing import Annotated, List

from fastapi import APIRouter, Depends, status

from backoffice.deps import SessionDependency
from backoffice.users.schemas import UserResponse
from backoffice.users.services import UserService

router = APIRouter()

async def get_user_service(session: SessionDependency) -> UserService:
    return UserService(session)

ServiceDependency = Annotated[UserService, Depends(get_user_service)]

@router.get("", response_model=List[UserResponse], status_code=status.HTTP_200_OK, summary="List all users")
async def get_users(service: ServiceDependency):
    return await service.list_users()
