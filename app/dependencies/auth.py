from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from pydantic import ValidationError
from sqlalchemy.orm import Session
from config.settings import JWT_SECRET, JWT_ALGORITHM
from app.models.auth_models import User
from app.schemas.auth_schema import UserUpsert
from app.services.user_store import upsert_user
from config.database import get_db

# o token é emitido pelo provedor de identidade; aqui só validamos
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthenticated(detail: str) -> HTTPException:
    return HTTPException(status_code=401, detail=detail, headers={"WWW-Authenticate": "Bearer"})


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None:
        raise _unauthenticated("Não autenticado")

    try:
        payload = jwt.decode(credentials.credentials, JWT_SECRET, algorithms=[JWT_ALGORITHM])
        user_id = payload.get("sub")
        if not user_id:
            raise _unauthenticated("Token inválido")
        identity = UserUpsert(
            id=user_id,
            email=payload.get("email"),
            first_name=payload.get("first_name"),
            last_name=payload.get("last_name"),
            profile_image_url=payload.get("profile_image_url"),
        )
    except (JWTError, ValidationError):
        raise _unauthenticated("Token inválido")

    # upsert a cada login: o perfil segue o que o provedor de identidade informa
    return upsert_user(db, identity)
