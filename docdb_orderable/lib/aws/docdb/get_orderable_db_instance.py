import logging
from typing import Optional

from .binder import bind_result
from .client import get_docdb_client
from .default_version import resolve_default_engine_version
from .enumerator import list_orderable_options
from .errors import NotFoundError
from .normalizer import build_query_plan
from .selector import select_orderable_option
from .types import DEFAULT_ENGINE, DEFAULT_LICENSE_MODEL, GetOrderableDbInstanceResult, OrderableDbInstanceFilters

logger = logging.getLogger(__name__)


def lookup_orderable_db_instance(filters: OrderableDbInstanceFilters, client=None) -> GetOrderableDbInstanceResult:
    """Resolve the filters to a single orderable DocDB instance option

    :param filters: The lookup filters
    :param client: boto3 docdb client, created for the configured region when omitted
    :return: GetOrderableDbInstanceResult
    """
    client = client or get_docdb_client()

    plan = resolve_default_engine_version(client, build_query_plan(filters))

    options = list_orderable_options(client, plan)

    if not options:
        raise NotFoundError("no DocDB Orderable DB Instance options found matching criteria; try different search")

    option = select_orderable_option(options, filters.preferred_instance_classes)

    logger.debug(f"selected DocDB instance class `{option.db_instance_class}`")

    return bind_result(option, filters)


def get_orderable_db_instance(
    instance_class: Optional[str] = None,
    preferred_instance_classes: Optional[list[str]] = None,
    engine: str = DEFAULT_ENGINE,
    engine_version: Optional[str] = None,
    default_only: bool = False,
    license_model: str = DEFAULT_LICENSE_MODEL,
    vpc: Optional[bool] = None,
    client=None,
    region: Optional[str] = None,
) -> GetOrderableDbInstanceResult:
    """
    Look up an orderable DocumentDB instance class

    Example::

        instance = get_orderable_db_instance(
            preferred_instance_classes=["db.r5.large", "db.r5.xlarge"],
            default_only=True,
        )
        docdb.ClusterInstance("main", instance_class=instance.instance_class, ...)

    :param instance_class: Exact instance class, conflicts with `preferred_instance_classes`
    :param preferred_instance_classes: Instance classes by priority, conflicts with `instance_class`
    :param engine: DB engine
    :param engine_version: Engine version, conflicts with `default_only`
    :param default_only: Use the default engine version of `engine`, conflicts with `engine_version`
    :param license_model: License model
    :param vpc: Filter on VPC capability, `None` to not filter
    :param client: boto3 docdb client
    :param region: AWS region used when `client` is not given
    :return: GetOrderableDbInstanceResult
    """
    filters = OrderableDbInstanceFilters(
        instance_class=instance_class,
        preferred_instance_classes=list(preferred_instance_classes or []),
        engine=engine,
        engine_version=engine_version,
        default_only=default_only,
        license_model=license_model,
        vpc=vpc,
    )

    return lookup_orderable_db_instance(filters, client or get_docdb_client(region))
