"""
Tests for plant records, search and creation
"""
import pytest

from grounded.models import Plant
from grounded.schemas.plants import PlantCreate
from grounded.utils.helpers import ensure_list


@pytest.fixture
def make_plant(db):
    def _make_plant(common_name, **fields):
        plant = Plant(**PlantCreate.model_validate({"commonName": common_name, **fields}).model_dump())
        db.add(plant)
        db.commit()
        return plant

    return _make_plant


@pytest.fixture
def plants(make_plant):
    make_plant(
        "Red Maple", plantType="tree", sunExposure=["full_sun", "part_shade"], tags=["native"],
        usdaZoneMin=3, usdaZoneMax=9, waterNeeds="moderate",
    )
    make_plant(
        "Boxwood", plantType="shrub", sunExposure="part_shade", designUses=["hedge"],
        usdaZoneMin=5, usdaZoneMax=8, waterNeeds="low",
    )
    make_plant(
        "Purple Coneflower", scientificName="Echinacea purpurea", plantType="perennial",
        sunExposure=["full_sun"], tags=["native", "pollinator"], usdaZoneMin=3, usdaZoneMax=9,
    )
    make_plant("Retired Fern", plantType="fern", isActive=False)


@pytest.mark.unit
class TestEnsureList:
    """Tests for coercing multi-valued fields"""

    def test_none_and_empty(self):
        assert ensure_list(None) == []
        assert ensure_list("") == []

    def test_scalar_wrapped(self):
        assert ensure_list("full_sun") == ["full_sun"]
        assert ensure_list(4) == [4]

    def test_list_copied(self):
        original = ["a", "b"]
        result = ensure_list(original)
        assert result == original
        assert result is not original

    def test_tuple(self):
        assert ensure_list(("a", "b")) == ["a", "b"]


@pytest.mark.unit
class TestPlantCreate:
    """Tests for normalizing incoming plant records"""

    def test_array_fields_always_lists(self):
        record = PlantCreate.model_validate({
            "commonName": "Red Maple",
            "sunExposure": "full_sun",
            "flowerColor": None,
            "tags": ["native"],
        })
        assert record.sun_exposure == ["full_sun"]
        assert record.flower_color == []
        assert record.tags == ["native"]
        assert record.design_uses == []

    def test_active_by_default(self):
        assert PlantCreate(common_name="Zinnia").is_active is True
        assert PlantCreate.model_validate({"commonName": "Zinnia", "isActive": None}).is_active is True

    def test_common_name_required(self):
        with pytest.raises(ValueError):
            PlantCreate.model_validate({"commonName": "  "})

    def test_natural_key(self):
        assert PlantCreate(common_name="Maple", scientific_name="Acer rubrum", cultivar="Red Sunset").natural_key == (
            "Acer rubrum", "Red Sunset",
        )
        assert PlantCreate(common_name="Maple", scientific_name="Acer rubrum").natural_key is None


@pytest.mark.integration
class TestPlantSearch:
    """Tests for GET /plants"""

    def names(self, response):
        return [plant["commonName"] for plant in response.json()["plants"]]

    def test_active_plants_by_name(self, client, plants):
        response = client.get("/api/v1/plants")
        assert response.status_code == 200
        assert self.names(response) == ["Boxwood", "Purple Coneflower", "Red Maple"]
        assert response.json()["total"] == 3

    def test_text_search(self, client, plants):
        assert self.names(client.get("/api/v1/plants", params={"q": "echinacea"})) == ["Purple Coneflower"]

    def test_plant_type(self, client, plants):
        assert self.names(client.get("/api/v1/plants", params={"plantType": "shrub"})) == ["Boxwood"]

    def test_sun_membership(self, client, plants):
        response = client.get("/api/v1/plants", params={"sun": "part_shade"})
        assert self.names(response) == ["Boxwood", "Red Maple"]

    def test_tag_and_zone(self, client, plants):
        response = client.get("/api/v1/plants", params={"tag": "native", "zone": 4})
        assert self.names(response) == ["Purple Coneflower", "Red Maple"]

    def test_design_use(self, client, plants):
        assert self.names(client.get("/api/v1/plants", params={"designUse": "hedge"})) == ["Boxwood"]

    def test_water(self, client, plants):
        assert self.names(client.get("/api/v1/plants", params={"water": "low"})) == ["Boxwood"]

    def test_pagination(self, client, plants):
        response = client.get("/api/v1/plants", params={"page": 2, "limit": 2})
        data = response.json()
        assert self.names(response) == ["Red Maple"]
        assert data["total"] == 3
        assert data["page"] == 2

    def test_filtered_pagination(self, client, plants):
        response = client.get("/api/v1/plants", params={"tag": "native", "limit": 1})
        assert self.names(response) == ["Purple Coneflower"]
        assert response.json()["total"] == 2

    def test_invalid_page(self, client):
        assert client.get("/api/v1/plants", params={"page": 0}).status_code == 400

    def test_stored_arrays_are_lists(self, client, plants):
        boxwood = client.get("/api/v1/plants", params={"plantType": "shrub"}).json()["plants"][0]
        assert boxwood["sunExposure"] == ["part_shade"]
        assert boxwood["flowerColor"] == []


@pytest.mark.integration
class TestPlantCreation:
    """Tests for POST /plants"""

    def test_single_object(self, client):
        response = client.post("/api/v1/plants", json={"commonName": "Zinnia", "plantType": "annual", "bloomSeason": "summer"})
        assert response.status_code == 201
        data = response.json()
        assert data["commonName"] == "Zinnia"
        assert data["bloomSeason"] == ["summer"]
        assert data["isActive"] is True

    def test_array_body(self, client):
        response = client.post(
            "/api/v1/plants",
            json=[{"commonName": "Zinnia"}, {"commonName": "Marigold"}],
        )
        assert response.status_code == 201
        assert [plant["commonName"] for plant in response.json()] == ["Zinnia", "Marigold"]

    def test_duplicate_natural_key(self, client):
        record = {"commonName": "Red Maple", "scientificName": "Acer rubrum", "cultivar": "October Glory"}
        assert client.post("/api/v1/plants", json=record).status_code == 201
        response = client.post("/api/v1/plants", json=record)
        assert response.status_code == 400
        assert "already exists" in response.json()["error"]
