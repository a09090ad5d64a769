"""Pydantic schemas for Pairing Method data validation."""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class FoodAttributes(BaseModel):
    """Normalized structural profile of a dish (0-5 integer scale)."""

    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="Display name of the dish")
    protein_intensity: int = Field(..., ge=0, le=5, description="Protein intensity (0=none, 5=dominant)")
    fat_level: int = Field(..., ge=0, le=5, description="Fat / richness level")
    acidity: int = Field(..., ge=0, le=5, description="Dish acidity / brightness")
    sweetness: int = Field(..., ge=0, le=5, description="Dish sweetness")
    spice_heat: int = Field(..., ge=0, le=5, description="Chili heat")
    umami: int = Field(..., ge=0, le=5, description="Savory depth")
    texture_weight: int = Field(0, ge=0, le=5, description="Texture weight (from texture or texture_weight)")


class WineAttributes(BaseModel):
    """Normalized structural profile of a wine."""

    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="Display name of the wine")
    body: int = Field(..., ge=0, le=5, description="Body weight (0=light, 5=full)")
    tannin: int = Field(..., ge=0, le=5, description="Tannin level")
    acidity: int = Field(..., ge=0, le=5, description="Acidity level")
    sweetness: int = Field(..., ge=0, le=5, description="Residual sweetness")
    alcohol: int = Field(3, ge=1, le=5, description="Alcohol level (1-5)")
    aromatic_intensity: int = Field(2, ge=1, le=5, description="Aromatic intensity (1-5)")
    flavor_profile: Tuple[str, ...] = Field(default_factory=tuple, description="Flavor notes, in dataset order")


class RuleOutcome(BaseModel):
    """Additive rule result: a signed score delta and why."""

    model_config = ConfigDict(frozen=True)

    delta: int = 0
    reasoning: Tuple[str, ...] = ()


class CapOutcome(BaseModel):
    """Capping rule result: an optional score ceiling and why."""

    model_config = ConfigDict(frozen=True)

    cap: Optional[int] = Field(None, ge=0, le=100)
    reasoning: Tuple[str, ...] = ()


class PairingResult(BaseModel):
    """Scored, explained pairing of one wine against a dish."""

    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="Wine display name")
    score: int = Field(0, ge=0, le=100, description="Pairing strength (0-100)")
    reasoning: Tuple[str, ...] = Field(default_factory=tuple, description="Fired rules, in evaluation order")
