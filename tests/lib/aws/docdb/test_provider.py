import pytest

from docdb_orderable.lib.aws.docdb import provider
from docdb_orderable.lib.aws.docdb.provider import OrderableDbInstanceProvider


@pytest.fixture
def lookup_provider(monkeypatch, docdb_client):
    regions = []

    def get_docdb_client(region=None):
        regions.append(region)
        return docdb_client

    monkeypatch.setattr(provider, "get_docdb_client", get_docdb_client)

    lookup_provider = OrderableDbInstanceProvider()
    lookup_provider.regions = regions
    return lookup_provider


class TestOrderableDbInstanceProvider:
    def test_create(self, lookup_provider, stubber, make_option):
        stubber.add_response(
            "describe_orderable_db_instance_options",
            {"OrderableDBInstanceOptions": [make_option("db.r5.large"), make_option("db.r5.xlarge")]},
            {"Engine": "docdb", "LicenseModel": "na"},
        )

        result = lookup_provider.create(
            {
                "preferred_instance_classes": ["db.r5.xlarge"],
                "engine": "docdb",
                "license_model": "na",
                "default_only": False,
                "region": "us-east-1",
            }
        )

        assert result.id == "db.r5.xlarge"
        assert result.outs["instance_class"] == "db.r5.xlarge"
        assert result.outs["availability_zones"] == ["us-east-1a", "us-east-1b", "us-east-1c"]
        assert result.outs["region"] == "us-east-1"
        assert "id" not in result.outs
        assert lookup_provider.regions == ["us-east-1"]
        assert result.outs["filters"]["preferred_instance_classes"] == ["db.r5.xlarge"]
        assert result.outs["filters"]["instance_class"] is None

    def test_read_uses_saved_filters(self, lookup_provider, stubber, make_option):
        stubber.add_response(
            "describe_orderable_db_instance_options",
            {"OrderableDBInstanceOptions": [make_option("db.r5.large"), make_option("db.t3.medium")]},
            {"Engine": "docdb", "LicenseModel": "na"},
        )

        state = {
            "instance_class": "db.t3.medium",
            "engine_version": "4.0.0",
            "filters": {"preferred_instance_classes": ["db.t3.medium"], "engine": "docdb", "license_model": "na"},
        }

        result = lookup_provider.read("db.t3.medium", state)

        assert result.id == "db.t3.medium"
        assert result.outs["engine_version"] == "4.0.0"
        assert result.outs["filters"]["instance_class"] is None

    def test_diff_ignores_computed_values(self, lookup_provider):
        olds = {
            "instance_class": "db.r5.large",
            "engine": "docdb",
            "engine_version": "4.0.0",
            "vpc": True,
            "filters": {"engine": "docdb", "license_model": "na"},
        }
        news = {"instance_class": None, "engine": "docdb", "engine_version": None, "license_model": "na", "vpc": None}

        result = lookup_provider.diff("db.r5.large", olds, news)

        assert result.changes is False
        assert result.replaces == []

    def test_diff_replaces_on_filter_change(self, lookup_provider):
        olds = {"engine": "docdb", "filters": {"engine": "docdb", "preferred_instance_classes": ["db.r5.large"]}}
        news = {"engine": "docdb", "preferred_instance_classes": ["db.r5.xlarge"]}

        result = lookup_provider.diff("db.r5.large", olds, news)

        assert result.changes is True
        assert result.replaces == ["preferred_instance_classes"]

    def test_diff_replaces_on_removed_pin(self, lookup_provider):
        olds = {
            "instance_class": "db.r5.large",
            "engine": "docdb",
            "engine_version": "4.0.0",
            "license_model": "na",
            "vpc": True,
            "filters": {
                "instance_class": "db.r5.large",
                "engine": "docdb",
                "engine_version": "4.0.0",
                "license_model": "na",
                "vpc": True,
            },
        }
        news = {"instance_class": None, "engine": "docdb", "engine_version": None, "license_model": "na", "vpc": None}

        result = lookup_provider.diff("db.r5.large", olds, news)

        assert result.changes is True
        assert result.replaces == ["instance_class", "engine_version", "vpc"]
