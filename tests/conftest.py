import boto3
import pytest
from botocore.stub import Stubber


@pytest.fixture
def docdb_client():
    return boto3.client(
        "docdb",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(docdb_client):
    with Stubber(docdb_client) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def make_option():
    def _make_option(
        instance_class,
        engine="docdb",
        engine_version="4.0.0",
        license_model="na",
        vpc=True,
        zones=("us-east-1a", "us-east-1b", "us-east-1c"),
    ) -> dict:
        return {
            "DBInstanceClass": instance_class,
            "Engine": engine,
            "EngineVersion": engine_version,
            "LicenseModel": license_model,
            "Vpc": vpc,
            "AvailabilityZones": [{"Name": zone} for zone in zones],
        }

    return _make_option
