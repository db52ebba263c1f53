"""Path/URL records and their decoders.

A record file is a list of two-field mappings::

    - path: /some-path
      url: https://www.some-url.com/demo
    - path: /urlshort
      url: https://github.com/gophercises/urlshort

``PathURL`` declares the shape; each field names its document key in
``metadata["key"]``. Decoders bind document values onto those fields by
key and never guess: a collection where a string belongs is a
``DecodeError``, a missing key or a null value is the empty string, and
unknown keys are ignored.

YAML is walked at the node level (``SafeLoader.get_node``) rather than through
``safe_load`` so scalars bind by their source text: ``port: 8080`` binds
``"8080"`` and ``flag: yes`` binds ``"yes"``, never ``"True"``.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable, Iterable
from typing import Any

import yaml

from urlshort.errors import DecodeError

_YAML_NULL = "tag:yaml.org,2002:null"


@dataclasses.dataclass(frozen=True, slots=True)
class PathURL:
    """One path → URL pair."""

    path: str = dataclasses.field(default="", metadata={"key": "path"})
    url: str = dataclasses.field(default="", metadata={"key": "url"})


def _bind[T](cls: type[T], items: Iterable[tuple[str, Any]], convert: Callable[[str, Any], str]) -> T:
    """Build *cls* from key/value pairs, matching on each field's declared key.

    Later pairs for the same key win. *convert* turns a raw value into the
    field's string, raising ``DecodeError`` on a type mismatch.
    """
    by_key = {f.metadata.get("key", f.name): f.name for f in dataclasses.fields(cls)}
    kwargs: dict[str, str] = {}
    for key, raw in items:
        name = by_key.get(key)
        if name is not None:
            kwargs[name] = convert(key, raw)
    return cls(**kwargs)


# -- YAML --


def _is_yaml_null(node: yaml.Node) -> bool:
    return isinstance(node, yaml.ScalarNode) and node.tag == _YAML_NULL


def _yaml_scalar(key: str, node: yaml.Node) -> str:
    if _is_yaml_null(node):
        return ""
    if isinstance(node, yaml.ScalarNode):
        return node.value
    kind = "sequence" if isinstance(node, yaml.SequenceNode) else "mapping"
    line = node.start_mark.line + 1
    msg = f"line {line}: cannot decode {kind} into string field {key!r}"
    raise DecodeError(msg)


def _yaml_pairs(node: yaml.MappingNode) -> Iterable[tuple[str, yaml.Node]]:
    for key_node, value_node in node.value:
        if isinstance(key_node, yaml.ScalarNode):
            yield key_node.value, value_node


def _first_yaml_document(raw: bytes | str) -> tuple[yaml.SafeLoader, yaml.Node | None]:
    """Compose the first document of *raw*; any documents after it are never read."""
    try:
        loader = yaml.SafeLoader(raw)
    except yaml.YAMLError as exc:
        raise DecodeError(f"invalid YAML: {exc}", cause=exc) from exc
    try:
        return loader, (loader.get_node() if loader.check_node() else None)
    except yaml.YAMLError as exc:
        loader.dispose()
        raise DecodeError(f"invalid YAML: {exc}", cause=exc) from exc


def _yaml_item_pairs(loader: yaml.SafeLoader, node: yaml.MappingNode) -> Iterable[tuple[str, yaml.Node]]:
    # Expands ``<<`` merge keys in place; the item's own keys come after merged ones.
    try:
        loader.flatten_mapping(node)
    except yaml.YAMLError as exc:
        raise DecodeError(f"invalid YAML: {exc}", cause=exc) from exc
    return _yaml_pairs(node)


def decode_yaml_records(raw: bytes | str) -> list[PathURL]:
    """Decode a YAML sequence of ``path``/``url`` mappings.

    Only the first document of a multi-document stream is decoded.
    ``<<`` merge keys are honoured, with the item's own keys winning.

    Raises:
        DecodeError: On malformed YAML, a top level that is not a
            sequence, an item that is not a mapping, or a collection
            bound to a string field.
    """
    loader, root = _first_yaml_document(raw)
    try:
        if root is None or _is_yaml_null(root):
            return []
        if not isinstance(root, yaml.SequenceNode):
            line = root.start_mark.line + 1
            msg = f"line {line}: expected a sequence of path/url records, got {root.id}"
            raise DecodeError(msg)

        records: list[PathURL] = []
        for item in root.value:
            if _is_yaml_null(item):
                records.append(PathURL())
            elif isinstance(item, yaml.MappingNode):
                records.append(_bind(PathURL, _yaml_item_pairs(loader, item), _yaml_scalar))
            else:
                line = item.start_mark.line + 1
                msg = f"line {line}: cannot decode {item.id} into a path/url record"
                raise DecodeError(msg)
        return records
    finally:
        loader.dispose()


# -- JSON --


def _json_string(key: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    msg = f"cannot decode JSON {type(value).__name__} into string field {key!r}"
    raise DecodeError(msg)


def decode_json_records(raw: bytes | str) -> list[PathURL]:
    """Decode a JSON array of ``{"path": ..., "url": ...}`` objects.

    Fields must be JSON strings or ``null``.
    """
    try:
        document = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"invalid JSON: {exc}", cause=exc) from exc

    if document is None:
        return []
    if not isinstance(document, list):
        msg = f"expected a JSON array of path/url records, got {type(document).__name__}"
        raise DecodeError(msg)

    records: list[PathURL] = []
    for index, item in enumerate(document):
        if item is None:
            records.append(PathURL())
        elif isinstance(item, dict):
            records.append(_bind(PathURL, item.items(), _json_string))
        else:
            msg = f"item {index}: cannot decode JSON {type(item).__name__} into a path/url record"
            raise DecodeError(msg)
    return records


def build_path_map(records: Iterable[PathURL]) -> dict[str, str]:
    """Fold records into a path → URL dict. A repeated path keeps its last URL."""
    return {record.path: record.url for record in records}
