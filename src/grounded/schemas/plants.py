"""
Plant catalog schemas

``PlantCreate`` is the ingestion boundary for catalog records, whether they
arrive through the API or from partition files. Every multi-valued attribute
goes through ``ensure_list`` there, so stored plants always hold arrays.
"""
from typing import Any, List, Optional

from pydantic import field_validator

from grounded.models.plant import PLANT_ARRAY_FIELDS
from grounded.schemas.base import BaseSchema, BaseResponseSchema, NonEmptyStr
from grounded.utils.helpers import ensure_list


class PlantFields(BaseSchema):
    common_name: NonEmptyStr
    scientific_name: Optional[str] = None
    cultivar: Optional[str] = None
    genus: Optional[str] = None
    plant_type: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    usda_zone_min: Optional[int] = None
    usda_zone_max: Optional[int] = None
    water_needs: Optional[str] = None
    is_active: bool = True

    tags: List[Any] = []
    sun_exposure: List[Any] = []
    soil_type: List[Any] = []
    flower_color: List[Any] = []
    foliage_color: List[Any] = []
    fall_color: List[Any] = []
    bloom_season: List[Any] = []
    pollinators: List[Any] = []
    wildlife_value: List[Any] = []
    resistances: List[Any] = []
    common_sizes: List[Any] = []
    design_uses: List[Any] = []


class PlantCreate(PlantFields):

    @field_validator(*PLANT_ARRAY_FIELDS, mode="before")
    @classmethod
    def coerce_array(cls, v):
        return ensure_list(v)

    @field_validator("scientific_name", "cultivar", "genus", "plant_type", "category", "water_needs", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("is_active", mode="before")
    @classmethod
    def default_active(cls, v):
        return True if v is None else v

    @property
    def natural_key(self):
        """(scientific name, cultivar) when both are present"""
        if self.scientific_name and self.cultivar:
            return self.scientific_name, self.cultivar
        return None


class PlantResponse(PlantFields, BaseResponseSchema):
    pass


class PlantListResponse(BaseSchema):
    plants: List[PlantResponse]
    total: int
    page: int
    limit: int


class CatalogImportResult(BaseSchema):
    total: int
    created: int
    updated: int
    errors: int
