"""Pet records, used only to classify products.

The pet directory decides which product ``type`` tags count as pet
species, and whether a disabled product is disabled because its pet is.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from petadmin.domain.model.product import DEFAULT_PET_TYPES

PET_ACTIVE = 1


@dataclass(frozen=True)
class Pet:
    id: int
    name: str
    type: str | None
    status: int = PET_ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == PET_ACTIVE


def active_pet_types(pets: Iterable[Pet]) -> tuple[str, ...]:
    """Unique, sorted species tags of the active pets.

    Falls back to ``DEFAULT_PET_TYPES`` when there are no usable pets so
    the pet facet still works against an empty directory.
    """
    types = {
        pet.type.strip()
        for pet in pets
        if pet.is_active and pet.type and pet.type.strip()
    }
    if not types:
        return DEFAULT_PET_TYPES
    return tuple(sorted(types))


def find_pet(pets: Iterable[Pet], pet_id: int | None) -> Pet | None:
    if pet_id is None:
        return None
    for pet in pets:
        if pet.id == pet_id:
            return pet
    return None
