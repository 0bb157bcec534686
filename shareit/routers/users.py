# shareit/routers/users.py
from fastapi import APIRouter, Depends, Path, status
from typing import List

from ..dependencies import get_user_service
from ..schemas.user import UserCreate, UserOut, UserUpdate
from ..services.users import UserService

router = APIRouter()

@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserOut)
async def create_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    return await service.create_user(payload)

@router.get("", response_model=List[UserOut])
async def list_users(service: UserService = Depends(get_user_service)):
    return await service.list_users()

@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: int = Path(..., gt=0), service: UserService = Depends(get_user_service)):
    return await service.get_user(user_id)

@router.patch("/{user_id}", response_model=UserOut)
async def update_user(
    payload: UserUpdate,
    user_id: int = Path(..., gt=0),
    service: UserService = Depends(get_user_service),
):
    return await service.update_user(user_id, payload)

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int = Path(..., gt=0), service: UserService = Depends(get_user_service)):
    await service.delete_user(user_id)
