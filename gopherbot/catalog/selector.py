"""Random choice of one artwork option per catalog category."""

from __future__ import annotations

import random

from gopherbot.catalog.models import Catalog
from gopherbot.services.errors import EmptyCategoryError

KEY_DELIMITER = "|"

# Seeded once from the OS; SystemRandom keeps no state so threads can share it.
_default_rng: random.Random = random.SystemRandom()


def choose(catalog: Catalog, rng: random.Random | None = None) -> str:
    """
    Build a composite key with one option id per category, in catalog order.

    Raises ``EmptyCategoryError`` for a category without options.
    """

    rng = rng or _default_rng
    option_ids: list[str] = []
    for category in catalog.categories:
        if not category.images:
            raise EmptyCategoryError(category.id)
        index = rng.randrange(len(category.images))
        option_ids.append(category.images[index].id)
    return KEY_DELIMITER.join(option_ids)
