from .types import DEFAULT_ENGINE, DEFAULT_LICENSE_MODEL, OrderableDbInstanceFilters, QueryPlan


def build_query_plan(filters: OrderableDbInstanceFilters) -> QueryPlan:
    """Turn the filters into the predicates of the orderable options query

    Empty strings are treated as unset. `vpc` is only forwarded when it was explicitly set to True or False.

    :param filters: The lookup filters
    :return: QueryPlan
    """
    return QueryPlan(
        db_instance_class=filters.instance_class or None,
        engine=filters.engine or DEFAULT_ENGINE,
        engine_version=filters.engine_version or None,
        license_model=filters.license_model or DEFAULT_LICENSE_MODEL,
        vpc=filters.vpc,
        resolve_default_version=bool(filters.default_only),
    )
