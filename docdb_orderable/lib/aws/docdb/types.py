from dataclasses import dataclass, field
from typing import Optional

from .errors import ConflictingFiltersError

DEFAULT_ENGINE = "docdb"
DEFAULT_LICENSE_MODEL = "na"


@dataclass
class OrderableDbInstanceFilters:
    instance_class: Optional[str] = None
    """Exact DB instance class to look up. Conflicts with `preferred_instance_classes`."""

    preferred_instance_classes: list[str] = field(default_factory=list)
    """Instance classes in order of preference, the first one that is orderable wins."""

    engine: str = DEFAULT_ENGINE
    """DB engine."""

    engine_version: Optional[str] = None
    """Exact engine version. Conflicts with `default_only`."""

    default_only: bool = False
    """Only consider the default engine version of `engine`. Conflicts with `engine_version`."""

    license_model: str = DEFAULT_LICENSE_MODEL
    """License model."""

    vpc: Optional[bool] = None
    """Filter on VPC capability. `None` does not filter at all."""

    def __post_init__(self):
        if self.instance_class and self.preferred_instance_classes:
            raise ConflictingFiltersError("instance_class", "preferred_instance_classes")

        if self.engine_version and self.default_only:
            raise ConflictingFiltersError("engine_version", "default_only")


@dataclass
class QueryPlan:
    db_instance_class: Optional[str] = None
    engine: Optional[str] = None
    engine_version: Optional[str] = None
    license_model: Optional[str] = None
    vpc: Optional[bool] = None

    resolve_default_version: bool = False
    """The engine version still has to be resolved from the engine's default version."""

    def to_request(self) -> dict:
        """Render the predicates as keyword arguments of `DescribeOrderableDBInstanceOptions`

        Unset predicates are left out so they do not constrain the query.

        :return: dict of request parameters
        """
        params = {
            "DBInstanceClass": self.db_instance_class,
            "Engine": self.engine,
            "EngineVersion": self.engine_version,
            "LicenseModel": self.license_model,
            "Vpc": self.vpc,
        }

        return {k: v for k, v in params.items() if v is not None}


@dataclass
class AvailabilityZone:
    name: str


@dataclass
class OrderableOption:
    db_instance_class: str
    engine: str
    engine_version: str
    license_model: str
    vpc_capable: Optional[bool]
    availability_zones: list[AvailabilityZone] = field(default_factory=list)
    storage_type: Optional[str] = None

    @classmethod
    def from_response(cls, option: dict) -> "OrderableOption":
        """Build an option from an entry of the `OrderableDBInstanceOptions` response list

        :param option: boto3 response entry
        :return: OrderableOption
        """
        return cls(
            db_instance_class=option.get("DBInstanceClass"),
            engine=option.get("Engine"),
            engine_version=option.get("EngineVersion"),
            license_model=option.get("LicenseModel"),
            vpc_capable=option.get("Vpc"),
            availability_zones=[AvailabilityZone(name=az.get("Name")) for az in option.get("AvailabilityZones") or []],
            storage_type=option.get("StorageType"),
        )


@dataclass
class GetOrderableDbInstanceResult:
    id: str
    """Set to the selected instance class."""

    instance_class: str
    engine: str
    engine_version: str
    license_model: str
    vpc: Optional[bool]

    availability_zones: list[str]
    """Availability zones the instance class can be placed in, in the order the service lists them."""

    default_only: bool = False
    preferred_instance_classes: list[str] = field(default_factory=list)
