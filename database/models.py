"""
SQLAlchemy ORM models for users and the Pokémon collection.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, String, Uuid
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


class User(Base):
    __tablename__ = "users"

    user_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False)
    pseudo = Column(String(128), nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))


class Pokemon(Base):
    __tablename__ = "pokemons"

    # Pokédex number, not a surrogate key.
    id = Column(Integer, primary_key=True, autoincrement=False)
    name_english = Column(String(64), nullable=False)
    name_japanese = Column(String(64), nullable=False)
    name_chinese = Column(String(64), nullable=False)
    name_french = Column(String(64), nullable=False, index=True)
    types = Column(JSON, nullable=False, default=list)
    hp = Column(Integer, nullable=False)
    attack = Column(Integer, nullable=False)
    defense = Column(Integer, nullable=False)
    special_attack = Column(Integer, nullable=False)
    special_defense = Column(Integer, nullable=False)
    speed = Column(Integer, nullable=False)
    image = Column(String(512), nullable=False)
