from unittest.mock import MagicMock

import pytest

from docdb_orderable.lib.aws.docdb import QueryPlan, UpstreamError, each_page, list_orderable_options


class TestEachPage:
    def test_last_page_is_flagged_once(self):
        pages = [{"Marker": "a"}, {"Marker": "b"}, {}]
        calls = []

        def callback(page, last_page):
            calls.append(last_page)
            return not last_page

        each_page(pages, callback)

        assert calls == [False, False, True]

    def test_stops_when_callback_says_so(self):
        pulled = []

        def pages():
            for marker in ("a", "b", "c"):
                pulled.append(marker)
                yield {"Marker": marker}

        each_page(pages(), lambda page, last_page: False)

        assert pulled == ["a"]


class TestListOrderableOptions:
    def test_all_pages_in_arrival_order(self, docdb_client, stubber, make_option):
        stubber.add_response(
            "describe_orderable_db_instance_options",
            {
                "OrderableDBInstanceOptions": [make_option("db.r5.xlarge"), make_option("db.r5.large")],
                "Marker": "page-2",
            },
            {"Engine": "docdb", "LicenseModel": "na"},
        )
        stubber.add_response(
            "describe_orderable_db_instance_options",
            {"OrderableDBInstanceOptions": [make_option("db.t3.medium")]},
            {"Engine": "docdb", "LicenseModel": "na", "Marker": "page-2"},
        )

        options = list_orderable_options(docdb_client, QueryPlan(engine="docdb", license_model="na"))

        assert [option.db_instance_class for option in options] == ["db.r5.xlarge", "db.r5.large", "db.t3.medium"]

    def test_empty_is_not_an_error(self, docdb_client, stubber):
        stubber.add_response(
            "describe_orderable_db_instance_options",
            {"OrderableDBInstanceOptions": []},
            {"Engine": "docdb", "EngineVersion": "99.0.0"},
        )

        assert list_orderable_options(docdb_client, QueryPlan(engine="docdb", engine_version="99.0.0")) == []

    def test_null_entries_are_skipped(self, make_option):
        client = MagicMock()
        client.get_paginator.return_value.paginate.return_value = [
            {"OrderableDBInstanceOptions": [None, make_option("db.r5.large"), None], "Marker": "a"},
            {"OrderableDBInstanceOptions": [None], "Marker": "b"},
            {"OrderableDBInstanceOptions": None},
        ]

        options = list_orderable_options(client, QueryPlan(engine="docdb", vpc=False))

        assert [option.db_instance_class for option in options] == ["db.r5.large"]
        client.get_paginator.assert_called_once_with("describe_orderable_db_instance_options")
        client.get_paginator.return_value.paginate.assert_called_once_with(Engine="docdb", Vpc=False)

    def test_upstream_failure(self, docdb_client, stubber):
        stubber.add_client_error("describe_orderable_db_instance_options", service_error_code="InternalFailure")

        with pytest.raises(UpstreamError, match="error reading DocDB orderable DB instance options"):
            list_orderable_options(docdb_client, QueryPlan(engine="docdb"))
