"""
Pydantic schemas for the Pokémon collection.

The wire shape mirrors the classic Pokédex JSON: nested ``name`` and
``base`` objects and a ``type`` list.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

# Largest value a 32-bit signed INTEGER column holds.
MAX_DB_INT = 2**31 - 1


# ═══════════════════════════════════════════════════════════════════════════════
# Pokémon
# ═══════════════════════════════════════════════════════════════════════════════


class PokemonName(BaseModel):
    english: str = Field(..., min_length=1)
    japanese: str = Field(..., min_length=1)
    chinese: str = Field(..., min_length=1)
    french: str = Field(..., min_length=1)


class PokemonBase(BaseModel):
    HP: int = Field(..., ge=0, le=MAX_DB_INT)
    Attack: int = Field(..., ge=0, le=MAX_DB_INT)
    Defense: int = Field(..., ge=0, le=MAX_DB_INT)
    SpecialAttack: int = Field(..., ge=0, le=MAX_DB_INT)
    SpecialDefense: int = Field(..., ge=0, le=MAX_DB_INT)
    Speed: int = Field(..., ge=0, le=MAX_DB_INT)


class PokemonIn(BaseModel):
    id: int = Field(..., ge=1, le=MAX_DB_INT)
    name: PokemonName
    type: List[str] = Field(..., min_length=1)
    base: PokemonBase
    image: str = Field(..., min_length=1)


class PokemonUpdate(BaseModel):
    """Partial update; ``name`` and ``base`` replace the whole sub-object."""

    name: Optional[PokemonName] = None
    type: Optional[List[str]] = Field(default=None, min_length=1)
    base: Optional[PokemonBase] = None
    image: Optional[str] = Field(default=None, min_length=1)


class PokemonOut(PokemonIn):
    pass


class PokemonPage(BaseModel):
    results: List[PokemonOut] = Field(default_factory=list)
    total: int = 0


def pokemon_to_columns(data: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten a (possibly partial) wire-shaped dict into ORM column values."""
    columns: Dict[str, Any] = {}
    if "id" in data:
        columns["id"] = data["id"]
    if data.get("name") is not None:
        name = data["name"]
        columns.update(
            name_english=name["english"],
            name_japanese=name["japanese"],
            name_chinese=name["chinese"],
            name_french=name["french"],
        )
    if data.get("type") is not None:
        columns["types"] = list(data["type"])
    if data.get("base") is not None:
        base = data["base"]
        columns.update(
            hp=base["HP"],
            attack=base["Attack"],
            defense=base["Defense"],
            special_attack=base["SpecialAttack"],
            special_defense=base["SpecialDefense"],
            speed=base["Speed"],
        )
    if data.get("image") is not None:
        columns["image"] = data["image"]
    return columns


def pokemon_from_row(row: Any) -> PokemonOut:
    return PokemonOut(
        id=row.id,
        name=PokemonName(
            english=row.name_english,
            japanese=row.name_japanese,
            chinese=row.name_chinese,
            french=row.name_french,
        ),
        type=list(row.types or []),
        base=PokemonBase(
            HP=row.hp,
            Attack=row.attack,
            Defense=row.defense,
            SpecialAttack=row.special_attack,
            SpecialDefense=row.special_defense,
            Speed=row.speed,
        ),
        image=row.image,
    )
