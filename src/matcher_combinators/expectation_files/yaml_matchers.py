"""YAML expectation files with matcher tags.

Supported tags::

    !equals <any>            !embeds <any>           !prefix [..]
    !in-any-order [..]       !set-equals [..]        !set-embeds [..]
    !regex "pattern"         !absent                 !instance-of <type name>
    !within-delta {center: 10, delta: 2}   (or [10, 2])
    !match-with {overrides: {mapping: equals}, expected: <any>}

Untagged values keep their default matcher: mappings embed, everything else
must be equal.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from matcher_combinators.matchers import (
    ABSENT,
    MatcherConstructionError,
    embeds,
    equals,
    in_any_order,
    match_with,
    predicate,
    prefix,
    regex,
    set_embeds,
    set_equals,
    within_delta,
)


class ExpectationFileError(Exception):
    """Raised when an expectation or actual value file cannot be loaded."""


class ExpectationLoader(yaml.SafeLoader):  # pylint: disable=too-many-ancestors
    """Safe YAML loader that understands matcher tags."""


_VARIANT_BUILDERS: dict[str, Callable[[Any], object]] = {
    "equals": equals,
    "embeds": embeds,
    "prefix": prefix,
    "in-any-order": in_any_order,
    "set-equals": set_equals,
    "set-embeds": set_embeds,
}

_INSTANCE_TYPES: dict[str, tuple[type, ...]] = {
    "string": (str,),
    "integer": (int,),
    "number": (int, float),
    "boolean": (bool,),
    "mapping": (Mapping,),
    "sequence": (list, tuple),
    "null": (type(None),),
}


def load_expectation(path: Path | str) -> object:
    """Load an expectation file into raw values and matchers."""
    file_path = Path(path)
    return parse_expectation(_read_text(file_path), source=str(file_path))


def parse_expectation(text: str, source: str = "expectation") -> object:
    """Parse expectation YAML text into raw values and matchers."""
    try:
        return yaml.load(text, Loader=ExpectationLoader)  # noqa: S506
    except yaml.YAMLError as exc:
        raise ExpectationFileError(f"Failed to parse {source}: {exc}") from exc
    except MatcherConstructionError as exc:
        raise ExpectationFileError(f"Invalid matcher in {source}: {exc}") from exc


def load_actual(path: Path | str) -> object:
    """Load an actual value from a YAML or JSON file."""
    file_path = Path(path)
    try:
        return yaml.safe_load(_read_text(file_path))
    except yaml.YAMLError as exc:
        raise ExpectationFileError(f"Failed to parse {file_path}: {exc}") from exc


def _read_text(path: Path) -> str:
    if not path.exists():
        raise ExpectationFileError(f"File not found: {path}")
    return path.read_text(encoding="utf-8")


def _construct_plain(loader: yaml.SafeLoader, node: yaml.Node) -> Any:
    if isinstance(node, yaml.MappingNode):
        return loader.construct_mapping(node, deep=True)
    if isinstance(node, yaml.SequenceNode):
        return loader.construct_sequence(node, deep=True)
    tag = loader.resolve(yaml.ScalarNode, node.value, (node.style is None, False))
    retagged = yaml.ScalarNode(tag, node.value, node.start_mark, node.end_mark, node.style)
    return loader.construct_object(retagged, deep=True)


def _variant_constructor(name: str) -> Callable[[yaml.SafeLoader, yaml.Node], object]:
    build = _VARIANT_BUILDERS[name]

    def construct(loader: yaml.SafeLoader, node: yaml.Node) -> object:
        return build(_construct_plain(loader, node))

    return construct


def _construct_regex(loader: yaml.SafeLoader, node: yaml.Node) -> object:
    return regex(loader.construct_scalar(node))  # type: ignore[arg-type]


def _construct_absent(loader: yaml.SafeLoader, node: yaml.Node) -> object:
    return ABSENT


def _construct_within_delta(loader: yaml.SafeLoader, node: yaml.Node) -> object:
    value = _construct_plain(loader, node)
    if isinstance(value, Mapping) and set(value) == {"center", "delta"}:
        return within_delta(value["center"], value["delta"])
    if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
        return within_delta(value[0], value[1])
    raise MatcherConstructionError(
        f"!within-delta needs {{center, delta}} or [center, delta], got {value!r}"
    )


def _construct_instance_of(loader: yaml.SafeLoader, node: yaml.Node) -> object:
    name = str(loader.construct_scalar(node))  # type: ignore[arg-type]
    types = _INSTANCE_TYPES.get(name)
    if types is None:
        raise MatcherConstructionError(f"Unknown type name for !instance-of: {name!r}")
    return predicate(_is_instance(types, exclude_bool=name in ("integer", "number")))


def _construct_match_with(loader: yaml.SafeLoader, node: yaml.Node) -> object:
    value = _construct_plain(loader, node)
    if not isinstance(value, Mapping) or set(value) != {"overrides", "expected"}:
        raise MatcherConstructionError("!match-with needs exactly 'overrides' and 'expected'.")
    overrides = value["overrides"]
    if not isinstance(overrides, Mapping):
        raise MatcherConstructionError("!match-with overrides must map shapes to matcher names.")
    table = []
    for shape, variant in overrides.items():
        if variant not in _VARIANT_BUILDERS:
            raise MatcherConstructionError(f"Unknown matcher name in overrides: {variant!r}")
        table.append((str(shape), _VARIANT_BUILDERS[variant]))
    return match_with(table, value["expected"])


def _is_instance(types: tuple[type, ...], *, exclude_bool: bool) -> Callable[[object], bool]:
    def check(value: object) -> bool:
        if exclude_bool and isinstance(value, bool):
            return False
        return isinstance(value, types)

    check.__qualname__ = f"instance_of({', '.join(kind.__name__ for kind in types)})"
    return check


for _name in _VARIANT_BUILDERS:
    ExpectationLoader.add_constructor(f"!{_name}", _variant_constructor(_name))
ExpectationLoader.add_constructor("!regex", _construct_regex)
ExpectationLoader.add_constructor("!absent", _construct_absent)
ExpectationLoader.add_constructor("!within-delta", _construct_within_delta)
ExpectationLoader.add_constructor("!instance-of", _construct_instance_of)
ExpectationLoader.add_constructor("!match-with", _construct_match_with)
