from __future__ import annotations

from typing import Optional
from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from .base import Base, engine
from .models import Preference, utcnow


def init_db(bind: Engine | None = None):
    Base.metadata.create_all(bind=bind or engine)


def get_preference(session: Session, key: str) -> Optional[str]:
    stmt = select(Preference.value).where(Preference.key == key)
    return session.scalar(stmt)


def set_preference(session: Session, key: str, value: str) -> Preference:
    pref = session.get(Preference, key)
    if not pref:
        pref = Preference(key=key, value=value)
        session.add(pref)
    else:
        pref.value = value
        pref.updated_at = utcnow()
    session.flush()
    return pref
