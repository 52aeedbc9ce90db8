from typing import Callable, Iterable, Optional

import boto3

from docdb_orderable.lib.config import get_region


def get_docdb_client(region: Optional[str] = None):
    """Create a boto3 DocumentDB client

    The region falls back to the `aws:region` stack configuration, then to boto3's own resolution
    (`AWS_REGION`, profile, ...).

    :param region: AWS region
    :return: boto3 docdb client
    """
    return boto3.client("docdb", region_name=region or get_region())


def is_last_page(page: dict) -> bool:
    return not page.get("Marker")


def each_page(pages: Iterable[dict], callback: Callable[[dict, bool], bool]) -> None:
    """Feed every page of a paginated response to `callback`

    The callback receives the page and whether it is the last one, and returns whether to keep going.
    Pages are pulled lazily so nothing is requested once the callback asks to stop.

    :param pages: A boto3 page iterator
    :param callback: Called as `callback(page, last_page)`
    """
    for page in pages:
        if not callback(page, is_last_page(page)):
            break
