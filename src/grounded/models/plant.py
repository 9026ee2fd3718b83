"""
Plant catalog model
"""
from sqlalchemy import Column, String, Text, Integer, Boolean, JSON, UniqueConstraint

from grounded.models.base import BaseModel

# Multi-valued attributes, always stored as JSON arrays
PLANT_ARRAY_FIELDS = (
    "tags",
    "sun_exposure",
    "soil_type",
    "flower_color",
    "foliage_color",
    "fall_color",
    "bloom_season",
    "pollinators",
    "wildlife_value",
    "resistances",
    "common_sizes",
    "design_uses",
)


class Plant(BaseModel):
    """A plant catalog entry. Natural key is (scientific_name, cultivar)."""
    __tablename__ = "plants"
    __table_args__ = (
        UniqueConstraint("scientific_name", "cultivar", name="uq_plants_scientific_name_cultivar"),
    )

    common_name = Column(String(200), nullable=False, index=True)
    scientific_name = Column(String(200), nullable=True, index=True)
    cultivar = Column(String(200), nullable=True)
    genus = Column(String(100), nullable=True)
    plant_type = Column(String(50), nullable=True, index=True)
    category = Column(String(100), nullable=True, index=True)
    description = Column(Text, nullable=True)

    usda_zone_min = Column(Integer, nullable=True)
    usda_zone_max = Column(Integer, nullable=True)
    water_needs = Column(String(50), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    tags = Column(JSON, nullable=False, default=list)
    sun_exposure = Column(JSON, nullable=False, default=list)
    soil_type = Column(JSON, nullable=False, default=list)
    flower_color = Column(JSON, nullable=False, default=list)
    foliage_color = Column(JSON, nullable=False, default=list)
    fall_color = Column(JSON, nullable=False, default=list)
    bloom_season = Column(JSON, nullable=False, default=list)
    pollinators = Column(JSON, nullable=False, default=list)
    wildlife_value = Column(JSON, nullable=False, default=list)
    resistances = Column(JSON, nullable=False, default=list)
    common_sizes = Column(JSON, nullable=False, default=list)
    design_uses = Column(JSON, nullable=False, default=list)
