"""
Pokémon collection routes.

Reads are public; create / update / delete go through the bearer-token
gate.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Path, Query, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from auth.dependencies import db_session, get_current_user
from auth.jwt import TokenClaims
from config.settings import config
from database import helpers
from utils.errors import NotFoundError
from utils.schemas import (
    MAX_DB_INT,
    PokemonIn,
    PokemonOut,
    PokemonPage,
    PokemonUpdate,
    pokemon_from_row,
    pokemon_to_columns,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/pokemons", tags=["pokemons"])


@router.get("", response_model=PokemonPage)
async def list_pokemons(
    page: int = Query(1, ge=1, le=MAX_DB_INT),
    name: str = "",
    type: str = "",
    session: AsyncSession = Depends(db_session),
) -> PokemonPage:
    """Paginated list filtered by French name and type (case-insensitive)."""
    rows, total = await helpers.list_pokemons(
        session,
        page=page,
        name=name,
        type_=type,
        page_size=config.pokemons_page_size,
    )
    return PokemonPage(results=[pokemon_from_row(r) for r in rows], total=total)


@router.get("/{pokemon_id}", response_model=PokemonOut)
async def get_pokemon(
    pokemon_id: int = Path(..., ge=1, le=MAX_DB_INT),
    session: AsyncSession = Depends(db_session),
) -> PokemonOut:
    row = await helpers.get_pokemon(session, pokemon_id)
    if row is None:
        raise NotFoundError("Pokemon not found")
    return pokemon_from_row(row)


@router.post("", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
async def create_pokemon(
    payload: PokemonIn,
    claims: TokenClaims = Depends(get_current_user),
    session: AsyncSession = Depends(db_session),
) -> str:
    await helpers.create_pokemon(session, pokemon_to_columns(payload.model_dump()))
    logger.info("Pokemon #%s created by %s", payload.id, claims.email)
    return "Pokemon created successfully"


@router.put("/{pokemon_id}", response_class=PlainTextResponse)
async def update_pokemon(
    payload: PokemonUpdate,
    pokemon_id: int = Path(..., ge=1, le=MAX_DB_INT),
    claims: TokenClaims = Depends(get_current_user),
    session: AsyncSession = Depends(db_session),
) -> str:
    columns = pokemon_to_columns(payload.model_dump(exclude_none=True))
    if not await helpers.update_pokemon(session, pokemon_id, columns):
        raise NotFoundError("Pokemon not found or no changes made")
    return "Pokemon updated successfully"


@router.delete("/{pokemon_id}", response_class=PlainTextResponse)
async def delete_pokemon(
    pokemon_id: int = Path(..., ge=1, le=MAX_DB_INT),
    claims: TokenClaims = Depends(get_current_user),
    session: AsyncSession = Depends(db_session),
) -> str:
    if not await helpers.delete_pokemon(session, pokemon_id):
        raise NotFoundError("Pokemon not found")
    logger.info("Pokemon #%s deleted by %s", pokemon_id, claims.email)
    return "Pokemon deleted successfully"
