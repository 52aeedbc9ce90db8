from .types import GetOrderableDbInstanceResult, OrderableDbInstanceFilters, OrderableOption


def bind_result(option: OrderableOption, filters: OrderableDbInstanceFilters) -> GetOrderableDbInstanceResult:
    return GetOrderableDbInstanceResult(
        id=option.db_instance_class,
        instance_class=option.db_instance_class,
        engine=option.engine,
        engine_version=option.engine_version,
        license_model=option.license_model,
        vpc=option.vpc_capable,
        availability_zones=[az.name for az in option.availability_zones],
        default_only=filters.default_only,
        preferred_instance_classes=list(filters.preferred_instance_classes),
    )
