"""
Conversion of calculator results into (identifier, value) rows.
"""

import logging
from typing import Any, List, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)


def to_metric_rows(values: Mapping[int, Any],
                   row_ids: Optional[Mapping[int, Any]] = None) -> List[Tuple[Any, Any]]:
    """
    Turn a calculator's entity-ID -> value mapping into ordered rows.

    Args:
        values: Entity ID to metric value, in entity order
        row_ids: Optional entity ID to external row identifier mapping.
            Entities missing from it are skipped.

    Returns:
        List of (identifier, value) tuples in the order of values
    """
    if row_ids is None:
        return list(values.items())

    rows = []
    skipped = 0
    for entity_id, value in values.items():
        row_id = row_ids.get(entity_id)
        if row_id is None:
            skipped += 1
            continue
        rows.append((row_id, value))

    if skipped:
        logger.debug(f"Skipped {skipped} entities with no row ID")
    return rows
