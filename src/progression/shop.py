"""Cosmetic skin catalogue and purchases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class Skin:
    id: str
    name: str
    description: str
    price: int


SKINS: Dict[str, Skin] = {
    skin.id: skin
    for skin in (
        Skin("clay", "Classic Clay", "Traditional matte ceramic.", 0),
        Skin("wood", "Carved Wood", "Mahogany & Birch finish.", 150),
        Skin("porcelain", "Blue Porcelain", "Fine china with blue glaze.", 300),
    )
}
DEFAULT_SKIN_ID = "clay"


def get_skin(skin_id: str) -> Skin:
    if skin_id not in SKINS:
        raise ValueError(f"Unknown skin: {skin_id}")
    return SKINS[skin_id]
