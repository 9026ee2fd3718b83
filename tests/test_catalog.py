"""
Tests for catalog partition files, the merged catalog and its cache
"""
import json

import pytest

from grounded.core.config import settings
from grounded.scripts.split_plants import main as split_plants_main
from grounded.services.catalog_service import (
    CatalogCache,
    catalog_cache,
    load_catalog,
    partition_for_plant_type,
    write_partitions,
)


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture
def catalog_dir(tmp_path):
    """Two partitions plus one file that does not match the pattern"""
    directory = tmp_path / "data"
    directory.mkdir()
    write_json(directory / "plants-trees.json", [{"commonName": "Red Maple"}, {"commonName": "Willow Oak"}])
    write_json(directory / "plants-annuals.json", [{"commonName": "Zinnia"}])
    write_json(directory / "notes.json", [{"commonName": "ignored"}])
    return directory


@pytest.mark.unit
class TestLoadCatalog:
    """Tests for merging partition files"""

    def test_merges_files_in_name_order(self, catalog_dir):
        catalog = load_catalog(catalog_dir)
        assert [item["commonName"] for item in catalog["items"]] == ["Zinnia", "Red Maple", "Willow Oak"]
        assert catalog["total"] == 3
        assert catalog["byFile"] == {"plants-annuals.json": 1, "plants-trees.json": 2}

    def test_total_matches_file_counts(self, catalog_dir):
        catalog = load_catalog(catalog_dir)
        assert catalog["total"] == sum(catalog["byFile"].values()) == len(catalog["items"])

    def test_non_array_file_counts_as_zero(self, catalog_dir):
        write_json(catalog_dir / "plants-shrubs.json", {"commonName": "not a list"})
        catalog = load_catalog(catalog_dir)
        assert catalog["total"] == 3
        assert catalog["byFile"]["plants-shrubs.json"] == 0

    def test_invalid_json_counts_as_zero(self, catalog_dir):
        (catalog_dir / "plants-vines.json").write_text("[{", encoding="utf-8")
        catalog = load_catalog(catalog_dir)
        assert catalog["total"] == 3
        assert catalog["byFile"]["plants-vines.json"] == 0

    def test_missing_directory(self, tmp_path):
        catalog = load_catalog(tmp_path / "missing")
        assert catalog["items"] == []
        assert catalog["total"] == 0
        assert catalog["byFile"] == {}

    def test_same_files_same_catalog(self, catalog_dir):
        first = load_catalog(catalog_dir)
        second = load_catalog(catalog_dir)
        assert first["items"] == second["items"]
        assert first["byFile"] == second["byFile"]

    def test_generated_at_is_utc_iso(self, catalog_dir):
        assert load_catalog(catalog_dir)["generatedAt"].endswith("Z")


@pytest.mark.unit
class TestWritePartitions:
    """Tests for splitting records into partition files"""

    def test_partition_names(self):
        assert partition_for_plant_type("tree") == "plants-trees.json"
        assert partition_for_plant_type("groundcover") == "plants-groundcovers.json"
        assert partition_for_plant_type(None) == "plants-other.json"
        assert partition_for_plant_type("cactus") == "plants-other.json"

    def test_written_files_load_back(self, tmp_path):
        records = [
            {"commonName": "Red Maple", "plantType": "tree"},
            {"commonName": "Boxwood", "plantType": "shrub"},
            {"commonName": "River Birch", "plantType": "tree"},
        ]
        counts = write_partitions(records, tmp_path)
        assert counts == {"plants-trees.json": 2, "plants-shrubs.json": 1}

        catalog = load_catalog(tmp_path)
        assert catalog["total"] == 3
        assert [item["commonName"] for item in catalog["items"]] == ["Boxwood", "Red Maple", "River Birch"]


@pytest.mark.unit
class TestSplitPlantsCommand:
    """Tests for the command that writes partition files"""

    def test_splits_combined_file(self, tmp_path):
        source = tmp_path / "plants.json"
        write_json(source, [
            {"commonName": "Red Maple", "plantType": "tree"},
            {"commonName": "Hosta", "plantType": "perennial"},
            {"commonName": "Mystery", "plantType": None},
        ])
        out_dir = tmp_path / "data"

        assert split_plants_main([str(source), "--data-dir", str(out_dir)]) == 0
        assert load_catalog(out_dir)["byFile"] == {
            "plants-other.json": 1,
            "plants-perennials.json": 1,
            "plants-trees.json": 1,
        }

    def test_source_must_be_an_array(self, tmp_path):
        source = tmp_path / "plants.json"
        write_json(source, {"commonName": "Red Maple"})
        assert split_plants_main([str(source), "--data-dir", str(tmp_path / "data")]) == 1
        assert not (tmp_path / "data").exists()

    def test_missing_source(self, tmp_path):
        assert split_plants_main([str(tmp_path / "nope.json"), "--data-dir", str(tmp_path)]) == 1


@pytest.mark.unit
class TestCatalogCache:
    """Tests for the in-process catalog cache"""

    def test_reuses_value_within_ttl(self):
        clock = [0.0]
        calls = []

        def loader():
            calls.append(clock[0])
            return {"items": [], "total": 0, "byFile": {}, "generatedAt": "now"}

        cache = CatalogCache(loader, ttl=60, clock=lambda: clock[0])
        cache.get()
        clock[0] = 59
        cache.get()
        assert len(calls) == 1

        clock[0] = 60
        cache.get()
        assert len(calls) == 2

    def test_invalidate_forces_reload(self):
        calls = []

        def loader():
            calls.append(1)
            return {"items": [], "total": 0, "byFile": {}, "generatedAt": "now"}

        cache = CatalogCache(loader, ttl=3600)
        cache.get()
        cache.invalidate()
        cache.get()
        assert len(calls) == 2

    def test_ttl_never_exceeds_an_hour(self):
        assert settings.catalog.cache_ttl <= 3600


@pytest.mark.integration
class TestCatalogEndpoints:
    """Tests for /catalog.json and the catalog import"""

    @pytest.fixture(autouse=True)
    def use_catalog_dir(self, monkeypatch, catalog_dir):
        monkeypatch.setattr(settings.catalog, "data_dir", str(catalog_dir))
        catalog_cache.invalidate()
        yield
        catalog_cache.invalidate()

    def test_catalog_json(self, client):
        response = client.get("/catalog.json")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert data["byFile"] == {"plants-annuals.json": 1, "plants-trees.json": 2}
        assert "stale-while-revalidate" in response.headers["cache-control"]

    def test_catalog_json_is_public(self, client):
        assert client.get("/catalog.json").status_code == 200

    def test_import_requires_login(self, client):
        assert client.post("/api/v1/catalog/import").status_code == 401

    def test_import_creates_then_updates(self, auth_client, catalog_dir):
        write_json(
            catalog_dir / "plants-trees.json",
            [
                {"commonName": "Red Maple", "scientificName": "Acer rubrum", "cultivar": "October Glory"},
                {"commonName": "Willow Oak"},
            ],
        )
        first = auth_client.post("/api/v1/catalog/import").json()
        assert first == {"total": 3, "created": 3, "updated": 0, "errors": 0}

        # Only the plant with a scientific name and cultivar can be matched again
        second = auth_client.post("/api/v1/catalog/import").json()
        assert second["updated"] == 1
        assert second["created"] == 2

    def test_import_counts_invalid_records(self, auth_client, catalog_dir):
        write_json(catalog_dir / "plants-shrubs.json", [{"scientificName": "Buxus"}])
        result = auth_client.post("/api/v1/catalog/import").json()
        assert result["errors"] == 1
        assert result["created"] == 3
