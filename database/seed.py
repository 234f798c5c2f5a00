"""
Load a Pokédex JSON file into the database.

Usage::

    python -m database.seed [path/to/pokemons.json]

The file holds a JSON array of Pokémon in the API shape. Ids already in
the table are skipped, so seeding twice is harmless.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from pydantic import TypeAdapter
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import config
from database.helpers import existing_pokemon_ids
from database.models import Pokemon
from database.session import async_session_factory, init_models
from utils.schemas import PokemonIn, pokemon_to_columns

logger = logging.getLogger(__name__)

_pokemon_list = TypeAdapter(List[PokemonIn])


def load_pokemons(path: str | Path) -> List[PokemonIn]:
    """Read and validate the JSON file; raises on any malformed entry."""
    raw: List[Dict[str, Any]] = json.loads(Path(path).read_text(encoding="utf-8"))
    return _pokemon_list.validate_python(raw)


async def seed_pokemons(session: AsyncSession, pokemons: List[PokemonIn]) -> int:
    """Insert every Pokémon whose id is not present yet; returns the count inserted."""
    known = await existing_pokemon_ids(session)
    inserted = 0
    for p in pokemons:
        if p.id in known:
            continue
        session.add(Pokemon(**pokemon_to_columns(p.model_dump())))
        known.add(p.id)
        inserted += 1
    await session.flush()
    return inserted


async def main(path: str) -> int:
    pokemons = load_pokemons(path)
    await init_models()
    async with async_session_factory() as session:
        inserted = await seed_pokemons(session, pokemons)
        await session.commit()
    logger.info("Seeded %d of %d pokemons from %s", inserted, len(pokemons), path)
    return inserted


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)-8s  %(name)s — %(message)s")
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else config.pokemons_data_file))
