"""
Plant catalog browsing and ingestion
"""
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError as SchemaValidationError
from sqlalchemy.exc import IntegrityError

from grounded.models import Plant
from grounded.repositories.plant_repository import PlantRepository
from grounded.schemas.plants import PlantCreate
from grounded.services.base_service import BaseService
from grounded.services.catalog_service import load_configured_catalog
from grounded.utils.exceptions import ValidationError
from grounded.utils.logging import get_logger

logger = get_logger(__name__)


class PlantService(BaseService[PlantRepository]):

    repository_class = PlantRepository
    entity_name = "Plant"

    def search_plants(self, page: int = 1, limit: int = 50, **filters) -> Tuple[List[Plant], int]:
        skip = (page - 1) * limit
        return self.repository.search(skip=skip, limit=limit, **filters)

    def create_plants(self, records: List[PlantCreate]) -> List[Plant]:
        """Insert one or more plants in a single transaction"""
        plants = [Plant(**record.model_dump()) for record in records]
        for plant in plants:
            self.repository.add(plant)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ValidationError("A plant with this scientific name and cultivar already exists")

        for plant in plants:
            self.db.refresh(plant)
        logger.info(f"[green]Created {len(plants)} plant(s)[/green]")
        return plants

    def upsert_plant(self, record: PlantCreate) -> bool:
        """
        Insert or update one plant by its natural key.

        Records without both a scientific name and a cultivar are always
        inserted. Returns True when an existing plant was updated.
        """
        key = record.natural_key
        existing = self.repository.find_by_natural_key(*key) if key else None
        if existing is not None:
            for field, value in record.model_dump().items():
                setattr(existing, field, value)
            self.db.commit()
            return True

        self.repository.add(Plant(**record.model_dump()))
        self.db.commit()
        return False

    def import_catalog(self, catalog: Optional[Dict[str, Any]] = None) -> Dict[str, int]:
        """
        Load the partition files into the plants table.

        A record that fails validation or cannot be stored is counted as an
        error and skipped; the rest of the import carries on.
        """
        catalog = catalog if catalog is not None else load_configured_catalog()
        created = updated = errors = 0

        for raw in catalog["items"]:
            name = raw.get("commonName") if isinstance(raw, dict) else None
            try:
                record = PlantCreate.model_validate(raw)
                if self.upsert_plant(record):
                    updated += 1
                else:
                    created += 1
            except SchemaValidationError as e:
                logger.error(f"[red]Invalid catalog record {name!r}:[/red] {e.error_count()} error(s)")
                errors += 1
            except IntegrityError as e:
                self.db.rollback()
                logger.error(f"[red]Could not store catalog record {name!r}:[/red] {e.orig}")
                errors += 1

        logger.info(
            f"✅ [bold green]Catalog imported:[/bold green] created={created}, "
            f"updated={updated}, errors={errors}"
        )
        return {"total": len(catalog["items"]), "created": created, "updated": updated, "errors": errors}
