from typing import Iterable, Optional

from .errors import AmbiguousResultError, NotFoundError
from .types import OrderableOption


def _find_preferred(
    options: list[OrderableOption],
    preferred_instance_classes: Iterable[str],
) -> Optional[OrderableOption]:
    for preferred_instance_class in preferred_instance_classes:
        for option in options:
            if option.db_instance_class == preferred_instance_class:
                return option

    return None


def select_orderable_option(
    options: list[OrderableOption],
    preferred_instance_classes: Optional[list[str]] = None,
) -> OrderableOption:
    """Pick exactly one option

    Preferences are tried in the given order, and within one preference the first option in arrival order
    wins. A preference listed twice has no further effect. When no preference matches, a single remaining
    option is returned and several remaining options are an error.

    :param options: Options in the order the service returned them
    :param preferred_instance_classes: Instance classes by priority
    :return: The selected option
    """
    found = _find_preferred(options, preferred_instance_classes or [])

    if found is not None:
        return found

    if len(options) > 1:
        raise AmbiguousResultError(options)

    if len(options) == 1:
        return options[0]

    raise NotFoundError("no DocDB DB Instance Classes match the criteria; try a different search")
