"""
Per-entity key/value metadata.

This module provides the MetadataStore attached to every graph, vertex and
edge, and the reserved keys used by the library itself.
"""

import logging
from typing import Any, Dict, Iterator, Tuple, TextIO

from ..core.exceptions import ArgumentError, MissingMetadataError
from . import utils

logger = logging.getLogger(__name__)


class ReservedMetadataKeys:
    """
    Metadata keys reserved by netmetrics.

    All reserved keys start with FIRST_CHAR so that they can't collide with
    keys chosen by callers.
    """

    FIRST_CHAR = '~'

    # Edge weight, a number. Read by EdgeCollection.get_edge_weight().
    EDGE_WEIGHT = FIRST_CHAR + 'EW'


class MetadataStore:
    """
    Open string-keyed map of arbitrary values plus a single Tag slot.

    The Tag is addressed independently of the key map: clearing or copying
    keys does not touch it unless asked to.
    """

    def __init__(self):
        self._values: Dict[str, Any] = {}
        self._tag: Any = None

    @property
    def tag(self) -> Any:
        return self._tag

    @tag.setter
    def tag(self, value: Any):
        self._tag = value

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: str) -> bool:
        return self.contains_key(key)

    def items(self) -> Iterator[Tuple[str, Any]]:
        """Iterate over key/value pairs in insertion order."""
        return iter(list(self._values.items()))

    def set_value(self, key: str, value: Any) -> None:
        """
        Insert a value or overwrite the value already stored under the key.

        Args:
            key: Non-empty metadata key
            value: Any object, including None
        """
        _check_key('set_value', key)
        self._values[key] = value

    def try_get_value(self, key: str, expected_type: type = object) -> Tuple[bool, Any]:
        """
        Look up a value without raising for a missing key.

        Args:
            key: Non-empty metadata key
            expected_type: Type the stored value must be an instance of. A
                stored None matches any type.

        Returns:
            (True, value) if the key exists and the value has the expected
            type, (False, None) otherwise
        """
        _check_key('try_get_value', key)
        if key not in self._values:
            return False, None

        value = self._values[key]
        if value is not None and not isinstance(value, expected_type):
            return False, None

        return True, value

    def get_required_value(self, key: str, value_type: type = object) -> Any:
        """
        Get a value that must exist.

        Raises:
            MissingMetadataError: If the key is absent or the value is not of
                value_type
        """
        found, value = self.try_get_value(key, value_type)
        if not found:
            if key in self._values:
                actual = type(self._values[key]).__name__
                raise MissingMetadataError(
                    f"The value with the key \"{key}\" is of type {actual}.  "
                    f"The expected type is {value_type.__name__}."
                )
            raise MissingMetadataError(f"A value with the key \"{key}\" does not exist.")
        return value

    def contains_key(self, key: str) -> bool:
        _check_key('contains_key', key)
        return key in self._values

    def remove_key(self, key: str) -> bool:
        """Remove a key. Returns False if the key didn't exist."""
        _check_key('remove_key', key)
        if key not in self._values:
            return False
        del self._values[key]
        return True

    def clear_metadata(self) -> None:
        """Remove all keys and the Tag."""
        self._values.clear()
        self._tag = None

    def copy_to(self, target: 'MetadataStore', copy_metadata_values: bool, copy_tag: bool) -> None:
        """
        Copy this store's contents to another store.

        Values are copied by reference. Keys already in the target that are
        not in this store are left alone.

        Args:
            target: Store to copy to
            copy_metadata_values: Copy the key/value pairs
            copy_tag: Copy the Tag
        """
        if target is None:
            raise ArgumentError("copy_to: target can't be None.")

        if copy_metadata_values:
            for key, value in self._values.items():
                target.set_value(key, value)

        if copy_tag:
            target.tag = self._tag

    def append_to_string(self, buffer: TextIO, indentation_level: int, format: str,
                         indent_first_line: bool = True) -> None:
        """
        Append a description of the store to a text buffer.

        Sample output with two keys:

            G:  2 key/value pairs
            P:  2 key/value pairs\\n
            D:  2 key/value pairs\\n
                \\tKey = abc, Value = xxx\\n
                \\tKey = de, Value = 123\\n

        Args:
            buffer: Object with a write() method, typically io.StringIO
            indentation_level: Number of tabs to prefix the count line with
            format: "G", "P" or "D"
            indent_first_line: Prefix the count line with tabs. Pass False when
                the count continues a line that is already indented.
        """
        utils.check_format(format)

        if indent_first_line:
            utils.append_indentation(buffer, indentation_level)
        count = len(self._values)
        buffer.write(f"{count:,} key/value pair")
        if count != 1:
            buffer.write('s')

        if format != 'G':
            buffer.write('\n')

        if format == 'D':
            for key, value in self._values.items():
                utils.append_indentation(buffer, indentation_level + 1)
                buffer.write(f"Key = {key}, Value = ")
                utils.append_object(buffer, value)
                buffer.write('\n')

    def __repr__(self) -> str:
        return f"MetadataStore({len(self._values)} keys, tag={self._tag!r})"


def _check_key(method_name: str, key: str) -> None:
    if not key:
        raise ArgumentError(f"{method_name}: key can't be None or empty.")
