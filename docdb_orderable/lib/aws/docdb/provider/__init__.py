from dataclasses import asdict, dataclass, field
from typing import Optional

from pulumi import Input, Output, ResourceOptions, dynamic, log

from ..client import get_docdb_client
from ..get_orderable_db_instance import lookup_orderable_db_instance
from ..types import DEFAULT_ENGINE, DEFAULT_LICENSE_MODEL, OrderableDbInstanceFilters

FILTER_KEYS = (
    "instance_class",
    "preferred_instance_classes",
    "engine",
    "engine_version",
    "default_only",
    "license_model",
    "vpc",
    "region",
)

FILTERS_KEY = "filters"
"""Output holding the filters as the user set them, the lookup overwrites some of the top level ones."""


@dataclass
class OrderableDbInstanceArgs(object):
    instance_class: Optional[Input[str]] = None
    preferred_instance_classes: Input[list[str]] = field(default_factory=list)
    engine: Input[str] = DEFAULT_ENGINE
    engine_version: Optional[Input[str]] = None
    default_only: Input[bool] = False
    license_model: Input[str] = DEFAULT_LICENSE_MODEL
    vpc: Optional[Input[bool]] = None
    region: Optional[Input[str]] = None


def _filter_inputs(props: dict) -> dict:
    inputs = {key: props.get(key) for key in FILTER_KEYS}
    inputs["preferred_instance_classes"] = list(inputs["preferred_instance_classes"] or [])
    inputs["default_only"] = bool(inputs["default_only"])
    return inputs


def _filters_from_props(props: dict) -> OrderableDbInstanceFilters:
    return OrderableDbInstanceFilters(
        instance_class=props.get("instance_class") or None,
        preferred_instance_classes=list(props.get("preferred_instance_classes") or []),
        engine=props.get("engine") or DEFAULT_ENGINE,
        engine_version=props.get("engine_version") or None,
        default_only=bool(props.get("default_only")),
        license_model=props.get("license_model") or DEFAULT_LICENSE_MODEL,
        vpc=props.get("vpc"),
    )


class OrderableDbInstanceProvider(dynamic.ResourceProvider):
    def _lookup(self, props: dict) -> tuple[str, dict]:
        inputs = _filter_inputs(props)
        filters = _filters_from_props(inputs)

        log.debug(f"looking up DocDB orderable DB instance for {filters}")

        result = asdict(lookup_orderable_db_instance(filters, get_docdb_client(inputs["region"])))
        id_ = result.pop("id")

        return id_, {**result, "region": inputs["region"], FILTERS_KEY: inputs}

    def create(self, props: dict):
        """
        Resolve the filters to an orderable instance class
        :param props:
        :return:
        """
        id_, outs = self._lookup(props)
        return dynamic.CreateResult(id_, outs)

    def read(self, id, props: dict):
        """
        Refresh the selected instance class with the saved filters
        :param id:
        :param props:
        :return:
        """
        id_, outs = self._lookup(props.get(FILTERS_KEY) or props)
        return dynamic.ReadResult(id_, outs)

    def diff(self, id, olds: dict, news: dict):
        """
        Any filter change triggers a new lookup
        :param id:
        :param olds:
        :param news:
        :return:
        """
        old_inputs = _filter_inputs(olds.get(FILTERS_KEY) or {})
        new_inputs = _filter_inputs(news)

        replaces = [key for key in FILTER_KEYS if new_inputs[key] != old_inputs[key]]
        return dynamic.DiffResult(changes=bool(replaces), replaces=replaces, delete_before_replace=True)

    def delete(self, id, props: dict):
        """
        Nothing to remove, the lookup does not own any cloud resource
        :param id:
        :param props:
        :return:
        """


class OrderableDbInstance(dynamic.Resource):
    instance_class: Output[str]
    preferred_instance_classes: Output[list[str]]
    engine: Output[str]
    engine_version: Output[str]
    default_only: Output[bool]
    license_model: Output[str]
    vpc: Output[bool]
    availability_zones: Output[list[str]]
    region: Output[Optional[str]]
    filters: Output[dict]

    def __init__(self, name: str, args: OrderableDbInstanceArgs, opts: ResourceOptions = None):
        props = {**vars(args), "availability_zones": None, FILTERS_KEY: None}
        super().__init__(OrderableDbInstanceProvider(), name, props, opts)
