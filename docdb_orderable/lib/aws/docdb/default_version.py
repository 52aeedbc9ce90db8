import logging
from dataclasses import replace

from botocore.exceptions import BotoCoreError, ClientError

from .errors import NotFoundError, UpstreamError
from .types import QueryPlan

logger = logging.getLogger(__name__)


def resolve_default_engine_version(client, plan: QueryPlan) -> QueryPlan:
    """Pin the plan's engine version to the default version of its engine

    `DescribeOrderableDBInstanceOptions` has no notion of a default version, so it is looked up
    with `DescribeDBEngineVersions` first and forwarded as an explicit version filter.

    :param client: boto3 docdb client
    :param plan: The query plan
    :return: A copy of the plan with `engine_version` set, or the plan itself if no resolution was requested
    """
    if not plan.resolve_default_version:
        return plan

    try:
        result = client.describe_db_engine_versions(Engine=plan.engine, DefaultOnly=True)
    except (BotoCoreError, ClientError) as e:
        raise UpstreamError(f"error reading DocDB default engine version: {e}") from e

    engine_versions = result.get("DBEngineVersions") or []

    if not engine_versions:
        raise NotFoundError(f"no DocDB default engine version found for engine: {plan.engine}")

    engine_version = engine_versions[0]["EngineVersion"]

    logger.debug(f"default engine version for `{plan.engine}` is `{engine_version}`")

    return replace(plan, engine_version=engine_version, resolve_default_version=False)
