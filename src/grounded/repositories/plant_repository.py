"""
Plant catalog data access
"""
from typing import List, Optional, Tuple

from sqlalchemy import or_

from grounded.models import Plant
from grounded.repositories.base_repository import BaseRepository


class PlantRepository(BaseRepository[Plant]):
    model = Plant

    def find_by_natural_key(self, scientific_name: str, cultivar: str) -> Optional[Plant]:
        return self.find_one_by(scientific_name=scientific_name, cultivar=cultivar)

    def search(
        self,
        q: Optional[str] = None,
        plant_type: Optional[str] = None,
        category: Optional[str] = None,
        sun: Optional[str] = None,
        water: Optional[str] = None,
        zone: Optional[int] = None,
        tag: Optional[str] = None,
        design_use: Optional[str] = None,
        skip: int = 0,
        limit: int = 50,
    ) -> Tuple[List[Plant], int]:
        """
        Filtered, paginated list of active plants ordered by common name.

        Scalar filters run in SQL. Array membership (sun, tag, design use)
        is checked in Python because JSON array containment is not portable
        across database backends.

        Returns:
            (page of plants, total matching count)
        """
        query = self.db.query(Plant).filter(Plant.is_active.is_(True))

        if q:
            pattern = f"%{q}%"
            query = query.filter(
                or_(
                    Plant.common_name.ilike(pattern),
                    Plant.scientific_name.ilike(pattern),
                    Plant.cultivar.ilike(pattern),
                    Plant.genus.ilike(pattern),
                )
            )
        if plant_type:
            query = query.filter(Plant.plant_type == plant_type)
        if category:
            query = query.filter(Plant.category == category)
        if water:
            query = query.filter(Plant.water_needs == water)
        if zone is not None:
            query = query.filter(Plant.usda_zone_min <= zone, Plant.usda_zone_max >= zone)

        query = query.order_by(Plant.common_name.asc(), Plant.id.asc())

        membership = [
            (field, value)
            for field, value in (("sun_exposure", sun), ("tags", tag), ("design_uses", design_use))
            if value
        ]
        if not membership:
            total = query.count()
            return query.offset(skip).limit(limit).all(), total

        matches = [
            plant
            for plant in query.all()
            if all(value in (getattr(plant, field) or []) for field, value in membership)
        ]
        return matches[skip:skip + limit], len(matches)
