from typing import Optional

from pulumi import Config

aws_config = Config("aws")

config_namespace = "docdb"
"""Default Pulumi config namespace holding the lookup filters (`docdb:engine`, `docdb:default_only`, ...)."""


def get_region() -> Optional[str]:
    """
    Retrieve the AWS region from the `aws:region` stack configuration
    :return: region, or None outside of a configured stack
    """
    return aws_config.get("region")
