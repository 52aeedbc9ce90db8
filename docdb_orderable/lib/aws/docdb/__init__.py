from .errors import (
    DocDBOrderableException,
    UpstreamError,
    NotFoundError,
    AmbiguousResultError,
    ConflictingFiltersError,
)
from .types import (
    OrderableDbInstanceFilters,
    QueryPlan,
    OrderableOption,
    AvailabilityZone,
    GetOrderableDbInstanceResult,
)
from .client import get_docdb_client, each_page
from .normalizer import build_query_plan
from .default_version import resolve_default_engine_version
from .enumerator import list_orderable_options
from .selector import select_orderable_option
from .binder import bind_result
from .get_orderable_db_instance import get_orderable_db_instance, lookup_orderable_db_instance
