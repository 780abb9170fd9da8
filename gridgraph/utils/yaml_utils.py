"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

import yaml
from yaml.constructor import ConstructorError

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Convert mapping keys produced by YAML parsing into strings.

    YAML 1.1 turns keys such as ``yes``, ``no``, ``on`` and ``off`` into
    booleans, and bare numbers into ints. Vertex names must be strings, so
    booleans become ``"True"``/``"False"`` and every other key is passed
    through ``str``.

    Args:
        data: Mapping as returned by the YAML parser.

    Returns:
        A new dictionary with string keys, in the original order.

    Examples:
        >>> normalize_yaml_dict_keys({True: 1, 7: 2, "a": 3})
        {'True': 1, '7': 2, 'a': 3}
    """
    return {str(key): value for key, value in data.items()}


class UniqueKeySafeLoader(yaml.SafeLoader):
    """SafeLoader that rejects mappings whose keys collide.

    Plain ``safe_load`` keeps the last of two equal keys. Keys also collide
    when Python considers them equal (``yes`` loads as ``True``, which equals
    ``1``) or when they normalize to the same string (``1`` and ``'1'``).
    Both cases raise ``ValueError`` here instead of dropping an entry.
    """

    def construct_mapping(self, node, deep=False):
        if not isinstance(node, yaml.MappingNode):
            raise ConstructorError(
                None,
                None,
                f"expected a mapping node, but found {node.id}",
                node.start_mark,
            )
        self.flatten_mapping(node)
        mapping: Dict[Any, Any] = {}
        key_lines: Dict[Any, int] = {}
        name_lines: Dict[str, int] = {}
        for key_node, value_node in node.value:
            key = self.construct_object(key_node, deep=deep)
            try:
                hash(key)
            except TypeError as exc:
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found unhashable key ({exc})",
                    key_node.start_mark,
                ) from exc
            name = str(key)
            line = key_node.start_mark.line + 1
            first = key_lines.get(key, name_lines.get(name))
            if first is not None:
                raise ValueError(
                    f"Duplicate key '{name}' at line {line} "
                    f"(already defined at line {first})"
                )
            key_lines[key] = line
            name_lines[name] = line
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping
