"""
Database helper functions for the Pokémon collection.

Every helper takes the request's ``AsyncSession`` and only flushes; the
session dependency owns commit / rollback.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Pokemon
from utils.errors import ConflictError, InfrastructureError

logger = logging.getLogger(__name__)


def _contains(term: str) -> str:
    """LIKE pattern matching *term* literally anywhere in the value."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _type_elements(dialect: str):
    """Table-valued expansion of ``Pokemon.types`` into one text row per type."""
    if dialect == "postgresql":
        return func.json_array_elements_text(Pokemon.types).table_valued("value")
    if dialect == "sqlite":
        return func.json_each(Pokemon.types).table_valued("value")
    raise InfrastructureError(f"Type filtering is not supported on {dialect}")


def _filters(name: str, type_: str, dialect: str) -> list:
    clauses = []
    if name:
        clauses.append(Pokemon.name_french.ilike(_contains(name), escape="\\"))
    if type_:
        elements = _type_elements(dialect)
        clauses.append(
            select(elements.c.value)
            .where(elements.c.value.ilike(_contains(type_), escape="\\"))
            .correlate(Pokemon)
            .exists()
        )
    return clauses


async def list_pokemons(
    session: AsyncSession,
    page: int = 1,
    name: str = "",
    type_: str = "",
    page_size: int = 20,
) -> Tuple[List[Pokemon], int]:
    """Return one page of matching Pokémon plus the total match count."""
    clauses = _filters(name, type_, session.bind.dialect.name)
    try:
        total = await session.scalar(
            select(func.count()).select_from(Pokemon).where(*clauses)
        )
        result = await session.execute(
            select(Pokemon)
            .where(*clauses)
            .order_by(Pokemon.id.asc())
            .limit(page_size)
            .offset((page - 1) * page_size)
        )
    except SQLAlchemyError as exc:
        raise InfrastructureError(str(exc)) from exc
    return list(result.scalars().all()), int(total or 0)


async def get_pokemon(session: AsyncSession, pokemon_id: int) -> Pokemon | None:
    try:
        return await session.get(Pokemon, pokemon_id)
    except SQLAlchemyError as exc:
        raise InfrastructureError(str(exc)) from exc


async def create_pokemon(session: AsyncSession, columns: Dict[str, Any]) -> Pokemon:
    """
    Insert a Pokémon.

    A duplicate Pokédex id is rejected by the primary key and reported
    as ``ConflictError``.
    """
    row = Pokemon(**columns)
    session.add(row)
    try:
        await session.flush()
    except IntegrityError as exc:
        raise ConflictError(f"Pokemon {columns.get('id')} already exists") from exc
    except SQLAlchemyError as exc:
        raise InfrastructureError(str(exc)) from exc
    logger.info("Created pokemon #%s (%s)", row.id, row.name_english)
    return row


async def update_pokemon(
    session: AsyncSession,
    pokemon_id: int,
    columns: Dict[str, Any],
) -> bool:
    """
    Apply *columns* to a Pokémon.

    Returns ``False`` when the Pokémon is absent or nothing actually
    changed, ``True`` otherwise.
    """
    row = await get_pokemon(session, pokemon_id)
    if row is None:
        return False

    changed = False
    for key, value in columns.items():
        if getattr(row, key) != value:
            setattr(row, key, value)
            changed = True
    if not changed:
        return False

    try:
        await session.flush()
    except SQLAlchemyError as exc:
        raise InfrastructureError(str(exc)) from exc
    logger.info("Updated pokemon #%s: %s", pokemon_id, sorted(columns))
    return True


async def delete_pokemon(session: AsyncSession, pokemon_id: int) -> bool:
    """Delete a Pokémon; returns ``False`` if it did not exist."""
    row = await get_pokemon(session, pokemon_id)
    if row is None:
        return False
    try:
        await session.delete(row)
        await session.flush()
    except SQLAlchemyError as exc:
        raise InfrastructureError(str(exc)) from exc
    logger.info("Deleted pokemon #%s", pokemon_id)
    return True


async def existing_pokemon_ids(session: AsyncSession) -> set[int]:
    result = await session.execute(select(Pokemon.id))
    return set(result.scalars().all())
