# app/utils/tokens.py
import jwt
from datetime import datetime, timedelta, timezone
from typing import Optional
from config.settings import JWT_SECRET, JWT_ALGORITHM, JWT_EXPIRE_DAYS


def jwt_for_user(
    user_id: str,
    email: Optional[str] = None,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
    profile_image_url: Optional[str] = None,
    expires_in: Optional[timedelta] = None,
) -> str:
    payload = {
        "sub": user_id,
        "email": email,
        "first_name": first_name,
        "last_name": last_name,
        "profile_image_url": profile_image_url,
        "exp": datetime.now(timezone.utc) + (expires_in or timedelta(days=JWT_EXPIRE_DAYS)),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)
