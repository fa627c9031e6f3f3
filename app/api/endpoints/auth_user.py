# app/api/endpoints/auth_user.py

from fastapi import APIRouter, Depends

from app.dependencies.auth import get_current_user
from app.models.auth_models import User
from app.schemas.auth_schema import UserRead

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/user", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)):
    return current_user
