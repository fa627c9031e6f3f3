# app/services/user_store.py

import logging
from typing import Optional

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from app.models.auth_models import User
from app.schemas.auth_schema import UserUpsert
from app.services.report_store import storage_guard
from app.utils.clock import utcnow

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def get_user(db: Session, user_id: str) -> Optional[User]:
    with storage_guard(db, "buscar usuário"):
        return db.get(User, user_id)


def upsert_user(db: Session, data: UserUpsert) -> User:
    """Insere ou atualiza o usuário pelo id (login vindo do provedor de identidade)."""
    values = data.model_dump()
    now = utcnow()

    with storage_guard(db, "salvar usuário"):
        insert = _UPSERT_DIALECTS.get(db.get_bind().dialect.name)
        if insert is not None:
            stmt = insert(User).values(**values, created_at=now, updated_at=now)
            update_set = {key: value for key, value in values.items() if key != "id"}
            update_set["updated_at"] = now
            stmt = stmt.on_conflict_do_update(index_elements=[User.id], set_=update_set)
            db.execute(stmt)
        else:
            # outros bancos: select + insert/update pelo ORM (não atômico)
            user = db.get(User, data.id)
            if user is None:
                user = User(id=data.id, created_at=now)
                db.add(user)
            for key, value in values.items():
                setattr(user, key, value)
            user.updated_at = now
        db.commit()
        user = db.get(User, data.id, populate_existing=True)

    logger.debug("Usuário %s sincronizado", user.id)
    return user
