"""YAML loader + schema validation for declarative edge lists.

A document has a single top-level ``vertices`` mapping. Each vertex entry may
carry ``data`` and ``edges``; ``edges`` is either a mapping of target name to
edge data or a list of ``[target, edge_data]`` pairs (the list form allows the
same target twice). Example::

    vertices:
      A:
        data: start
        edges: {B: 1}
      B:
        edges:
          - [C, 2]
      C: {}

Vertex names and mapping-form targets are normalized to strings; list-form
targets must already be strings. Keys that collide after YAML 1.1 coercion
(``yes`` and ``1``, or ``1`` and ``'1'``) are rejected. The loader returns
records in document order, ready for `gridgraph.graph.DirectedGraph.build`.
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict, List, Tuple

import jsonschema
import yaml

from gridgraph.logging import get_logger
from gridgraph.utils.yaml_utils import UniqueKeySafeLoader, normalize_yaml_dict_keys

LOGGER = get_logger(__name__)

_VERTEX_KEYS = {"data", "edges"}


def _load_schema() -> Dict[str, Any]:
    try:
        with (
            resources.files("gridgraph.schemas")
            .joinpath("edge_spec.json")
            .open("r", encoding="utf-8")
        ) as f:
            return json.load(f)
    except OSError as exc:  # pragma: no cover
        raise RuntimeError(
            "Failed to locate packaged schema 'gridgraph/schemas/edge_spec.json'."
        ) from exc


def _normalize(data: Dict[Any, Any]) -> Dict[str, Any]:
    """Stringify vertex names and mapping-form targets, checking shape early.

    These checks duplicate parts of the schema to give messages that name the
    offending vertex.
    """
    data = normalize_yaml_dict_keys(data)
    extra = set(data) - {"vertices"}
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s): {', '.join(sorted(extra))}. "
            "Allowed keys are ['vertices']"
        )

    vertices = data.get("vertices")
    if vertices is None:
        return {"vertices": {}}
    if not isinstance(vertices, dict):
        raise ValueError("'vertices' must be a mapping")

    vertex_defs: Dict[str, Any] = {}
    for name, vertex_def in normalize_yaml_dict_keys(vertices).items():
        if vertex_def is None:
            vertex_def = {}
        if not isinstance(vertex_def, dict):
            raise ValueError(f"Definition of vertex '{name}' must be a mapping")
        for key in vertex_def:
            if key not in _VERTEX_KEYS:
                raise ValueError(f"Unrecognized key '{key}' in vertex '{name}'")
        edges = vertex_def.get("edges")
        if isinstance(edges, dict):
            edges = normalize_yaml_dict_keys(edges)
        elif isinstance(edges, list):
            for entry in edges:
                if not isinstance(entry, list) or len(entry) != 2:
                    raise ValueError(
                        f"Edge entries of vertex '{name}' must be [target, data] pairs"
                    )
        elif edges is not None:
            raise ValueError(f"'edges' of vertex '{name}' must be a mapping or a list")
        vertex_defs[name] = {"data": vertex_def.get("data"), "edges": edges}
    return {"vertices": vertex_defs}


def load_edge_spec_yaml(yaml_str: str) -> List[Tuple[str, Any, List[Tuple[str, Any]]]]:
    """Parse and validate a YAML document into an edge list.

    Args:
        yaml_str: YAML text with a top-level ``vertices`` mapping.

    Returns:
        Records ``(name, vertex_data, [(target_name, edge_data), ...])``.

    Raises:
        ValueError: If the document has duplicate keys or an unexpected shape.
        jsonschema.ValidationError: If the document violates the packaged
            edge-list schema, e.g. a list-form target that is not a string.
    """
    data = yaml.load(yaml_str, Loader=UniqueKeySafeLoader)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    data = _normalize(data)
    jsonschema.validate(data, _load_schema())

    records = []
    for name, vertex_def in data["vertices"].items():
        edges = vertex_def["edges"] or []
        if isinstance(edges, dict):
            outgoing = list(edges.items())
        else:
            outgoing = [(target, edge_data) for target, edge_data in edges]
        records.append((name, vertex_def["data"], outgoing))

    LOGGER.debug("Loaded edge list with %d vertices", len(records))
    return records
