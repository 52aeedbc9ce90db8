class DocDBOrderableException(Exception):
    pass


class UpstreamError(DocDBOrderableException):
    """The DocumentDB API call failed"""


class NotFoundError(DocDBOrderableException):
    """Nothing matched the filters"""


class AmbiguousResultError(DocDBOrderableException):
    def __init__(self, options: list):
        candidates = "; ".join(
            f"{option.db_instance_class} (engine_version {option.engine_version}, "
            f"license_model {option.license_model}, vpc {option.vpc_capable})"
            for option in options
        )
        super().__init__(
            f"multiple DocDB DB Instance Classes ({candidates}) match the criteria; try a different search"
        )
        self.options = options
        self.instance_classes = [option.db_instance_class for option in options]


class ConflictingFiltersError(DocDBOrderableException):
    def __init__(self, key, conflicting_key):
        super().__init__(f"'{key}' conflicts with '{conflicting_key}', only one of them can be set")
