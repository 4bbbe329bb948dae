"""Pydantic schema of the gopherize.me artwork catalog."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class ArtworkOption(_FrozenModel):
    """A single selectable image inside a category."""

    id: str
    name: str = ""
    href: str = ""
    thumbnail_href: str = ""


class Category(_FrozenModel):
    """A body-part category (eyes, shirts, hats...) with its options."""

    id: str
    name: str = ""
    images: tuple[ArtworkOption, ...] = ()


class Catalog(_FrozenModel):
    """The full catalog as served by ``/api/artwork``."""

    categories: tuple[Category, ...] = ()
    total_combinations: int = Field(default=0, description="Informational only.")
