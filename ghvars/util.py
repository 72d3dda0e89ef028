import importlib
import logging
import os
from typing import TypeVar

from ghvars.constants import MAX_PER_PAGE

T = TypeVar("T")
_LOGGER = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}


def import_from(qual_name: str):
    """Import a value from its fully qualified name.

    This function is a utility to dynamically import any Python value (class, function, variable)
    from its fully qualified name. For example, 'ghvars.config.default_client_config.DefaultClientConfig'
    would import the DefaultClientConfig class from the ghvars.config.default_client_config module.

    Args:
        qual_name: A fully qualified name in the format 'module.submodule.name'

    Returns:
        The imported value (class, function, or variable)

    Raises:
        ValueError: If the name has no module part
    """
    parts = qual_name.split(".")
    if len(parts) < 2 or not all(part.strip() for part in parts[:-1]):
        raise ValueError(f"invalid_qualified_name:{qual_name}")
    module_name = ".".join(parts[:-1])
    module = importlib.import_module(module_name)
    result = getattr(module, parts[-1])
    return result


def get_impl(key: str, base_type: type[T], default_type: type | None = None) -> type[T]:
    """Get the implementation of base_type named by the environment variable key,
    falling back to default_type when the variable is unset or empty."""
    value = os.getenv(key)
    if not value:
        if default_type is None:
            raise ValueError("no_default_type")
        assert issubclass(default_type, base_type)
        return default_type
    imported_type = import_from(value)
    assert issubclass(imported_type, base_type)
    _LOGGER.debug(f"Using {imported_type.__name__} from {key}")
    return imported_type


def parse_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid_boolean:{value}")


def check_per_page(per_page: int | None) -> None:
    """Raise ValueError unless per_page is None or a page size the API accepts"""
    if per_page is not None and not 1 <= per_page <= MAX_PER_PAGE:
        raise ValueError(f"per_page must be between 1 and {MAX_PER_PAGE}")
