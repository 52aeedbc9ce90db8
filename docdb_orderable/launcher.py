import logging
import os

from pulumi import export, log

from docdb_orderable.lib.aws.docdb import OrderableDbInstanceFilters, lookup_orderable_db_instance
from docdb_orderable.lib.config import config_namespace, get_stack_config
from docdb_orderable.lib.utils import outputs_from_exports


def run_lookup(namespace: str = config_namespace) -> dict:
    """Look up an orderable DocDB instance with the filters from the stack configuration and export it

    Example `Pulumi.mystack.yaml`::

        config:
          aws:region: us-west-2
          docdb:preferred_instance_classes: '["db.r5.large", "db.r5.xlarge"]'
          docdb:default_only: "true"

    :param namespace: Config namespace holding the filters
    :return: The exported result
    """
    filters = get_stack_config(namespace, OrderableDbInstanceFilters)

    log.debug(f"running DocDB orderable DB instance lookup for `{namespace}`")

    outputs = outputs_from_exports(lookup_orderable_db_instance(filters))

    export(namespace, outputs)

    return outputs


# Pulumi programs import the launcher first, so this is where debug logging gets switched on.
if os.getenv("DOCDB_ORDERABLE_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
    msg = "docdb-orderable logging enabled"
    log.debug(msg)
    logging.debug(msg)
