from .core import (
    aws_config,
    config_namespace,
    get_region,
)
from .mapper import get_stack_config
