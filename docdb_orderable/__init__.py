from docdb_orderable.lib.aws.docdb import (
    get_orderable_db_instance,
    lookup_orderable_db_instance,
    OrderableDbInstanceFilters,
    GetOrderableDbInstanceResult,
    DocDBOrderableException,
    UpstreamError,
    NotFoundError,
    AmbiguousResultError,
    ConflictingFiltersError,
)
