"""
Record flattening.

Turns nested API records (parsed JSON) into single-level mappings whose keys
are the dot-joined path to each leaf, e.g. {"profile": {"email": "x"}}
becomes {"profile.email": "x"}.
"""
from typing import Any, Dict, Iterable, List
import logging

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = "."


def flatten_record(record: Dict[str, Any], separator: str = DEFAULT_SEPARATOR) -> Dict[str, Any]:
    """
    Flatten a nested record into a single-level dict.

    Rules:
    - Nested dicts are unwrapped; their keys are prefixed with the parent key
    - Lists are leaf values and are copied as-is (never recursed into)
    - An empty nested dict produces no entries, so its key disappears

    Input must be acyclic.

    Args:
        record: Nested record (e.g. one member from users.list)
        separator: String placed between path segments

    Returns:
        Flat dict in the record's key order

    Example:
        >>> flatten_record({"a": 1, "b": {"c": 2, "d": {"e": 3}}})
        {'a': 1, 'b.c': 2, 'b.d.e': 3}
    """
    flat = {}

    for key, value in record.items():
        if isinstance(value, dict):
            for sub_key, sub_value in flatten_record(value, separator).items():
                flat[f"{key}{separator}{sub_key}"] = sub_value
        else:
            flat[key] = value

    return flat


def flatten_records(records: Iterable[Dict[str, Any]], separator: str = DEFAULT_SEPARATOR) -> List[Dict[str, Any]]:
    """Flatten every record in a sequence."""
    flat_records = [flatten_record(record, separator) for record in records]
    logger.debug(f"Flattened {len(flat_records)} record(s)")
    return flat_records
