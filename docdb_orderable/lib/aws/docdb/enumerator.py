import logging

from botocore.exceptions import BotoCoreError, ClientError

from .client import each_page
from .errors import UpstreamError
from .types import OrderableOption, QueryPlan

logger = logging.getLogger(__name__)


def list_orderable_options(client, plan: QueryPlan) -> list[OrderableOption]:
    """List every orderable instance option matching the plan

    Consumes all pages and keeps the order the service returns options in. Null entries are skipped.
    An empty list is a valid result.

    :param client: boto3 docdb client
    :param plan: The query plan
    :return: list of OrderableOption
    """
    request = plan.to_request()

    logger.debug(f"Reading DocDB Orderable DB Instance Options: {request}")

    options = []

    def collect(page: dict, last_page: bool) -> bool:
        for option in page.get("OrderableDBInstanceOptions") or []:
            if option is None:
                continue

            options.append(OrderableOption.from_response(option))

        return not last_page

    paginator = client.get_paginator("describe_orderable_db_instance_options")

    try:
        each_page(paginator.paginate(**request), collect)
    except (BotoCoreError, ClientError) as e:
        raise UpstreamError(f"error reading DocDB orderable DB instance options: {e}") from e

    logger.debug(f"found {len(options)} DocDB orderable DB instance options")

    return options
