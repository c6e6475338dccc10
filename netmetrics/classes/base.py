"""
Base class shared by graphs, vertices and edges.

Every entity has an ID, an optional name and a lazily created MetadataStore.
"""

import io
from typing import Any, Optional, TextIO, Tuple

from .metadata import MetadataStore
from . import utils


class GraphVertexEdgeBase:
    """
    Identity and metadata support for graph entities.

    The metadata methods delegate to a MetadataStore that is created the
    first time a value or the Tag is set, so entities without metadata stay
    small.
    """

    def __init__(self, entity_id: Optional[int] = None, name: Optional[str] = None):
        self._id = entity_id
        self.name = name
        self._metadata: Optional[MetadataStore] = None

    @property
    def id(self) -> Optional[int]:
        """Collection-assigned ID, or None if the entity was never added."""
        return self._id

    @property
    def metadata(self) -> MetadataStore:
        if self._metadata is None:
            self._metadata = MetadataStore()
        return self._metadata

    @property
    def tag(self) -> Any:
        if self._metadata is None:
            return None
        return self._metadata.tag

    @tag.setter
    def tag(self, value: Any):
        self.metadata.tag = value

    def set_value(self, key: str, value: Any) -> None:
        self.metadata.set_value(key, value)

    def try_get_value(self, key: str, expected_type: type = object) -> Tuple[bool, Any]:
        return self.metadata.try_get_value(key, expected_type)

    def get_required_value(self, key: str, value_type: type = object) -> Any:
        return self.metadata.get_required_value(key, value_type)

    def get_value(self, key: str, default: Any = None) -> Any:
        """Return the value stored under key, or default if there is none."""
        found, value = self.metadata.try_get_value(key)
        return value if found else default

    def contains_key(self, key: str) -> bool:
        return self.metadata.contains_key(key)

    def remove_key(self, key: str) -> bool:
        return self.metadata.remove_key(key)

    def clear_metadata(self) -> None:
        if self._metadata is not None:
            self._metadata.clear_metadata()

    def _copy_to(self, other: 'GraphVertexEdgeBase', copy_metadata_values: bool, copy_tag: bool) -> None:
        # The name always travels with the copy; metadata only on request.
        other.name = self.name
        if self._metadata is not None:
            self._metadata.copy_to(other.metadata, copy_metadata_values, copy_tag)

    def to_string(self, format: str = 'G') -> str:
        """
        Describe the entity.

        Format "G" gives just the ID. "P" adds the name, Tag and metadata
        count, and "D" also lists every metadata key/value pair.
        """
        utils.check_format(format)
        buffer = io.StringIO()
        self.append_properties_to_string(buffer, 0, format)
        return buffer.getvalue()

    def append_properties_to_string(self, buffer: TextIO, indentation_level: int, format: str) -> None:
        utils.append_property(buffer, indentation_level, 'ID', _format_id(self._id), False)
        if format == 'G':
            return

        buffer.write('\n')
        utils.append_property(buffer, indentation_level, 'Name', self.name)
        utils.append_property(buffer, indentation_level, 'Tag', self.tag)
        utils.append_property(buffer, indentation_level, 'Values', '', False)

        if self._metadata is None:
            buffer.write('0 key/value pairs\n')
        else:
            self._metadata.append_to_string(buffer, indentation_level, format, indent_first_line=False)

    def __str__(self) -> str:
        return self.to_string('G')


def _format_id(entity_id: Optional[int]) -> Optional[str]:
    return None if entity_id is None else f"{entity_id:,}"
