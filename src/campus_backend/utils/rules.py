"""
Matching of entity records against caller supplied rules.

A rule is either a predicate or a mapping of field path to expected value,
e.g. {"type": "TEACHER"} or {"details.events": event_id}. All entries of a
mapping must match. A populated relation matches the id of its record and a
list matches when any element does, so {"members": user_id} finds the
records whose members include that user.
"""

from typing import Any, Iterable, List, Mapping

from pydantic import BaseModel

from campus_types.base import reference_id

_MISSING = object()


def resolve_path(item: Any, path: str) -> Any:
    """Follow a dotted path through dicts and models; _MISSING if absent."""
    value = item
    for part in path.split("."):
        if isinstance(value, Mapping):
            value = value.get(part, _MISSING)
        elif isinstance(value, BaseModel):
            value = getattr(value, part, _MISSING)
        else:
            return _MISSING
        if value is _MISSING:
            return _MISSING
    return value


def value_matches(value: Any, expected: Any) -> bool:
    if value is _MISSING:
        return False
    if value == expected:
        return True
    if isinstance(value, (list, tuple)) and not isinstance(expected, (list, tuple)):
        return any(value_matches(element, expected) for element in value)
    if isinstance(expected, str) and isinstance(value, (Mapping, BaseModel)):
        return reference_id(value) == expected
    return False


def matches_rule(item: Any, rule: Any) -> bool:
    if callable(rule):
        return bool(rule(item))
    if not isinstance(rule, Mapping):
        raise TypeError(f"Rule must be a mapping or a predicate, got {type(rule).__name__}")
    return all(value_matches(resolve_path(item, path), expected) for path, expected in rule.items())


def find_by_rule(items: Iterable[Any], rule: Any) -> List[Any]:
    """Return the items matching rule, keeping their order."""
    return [item for item in items if matches_rule(item, rule)]


def describe_rule(rule: Any) -> str:
    if callable(rule):
        return getattr(rule, "__name__", repr(rule))
    return repr(dict(rule))
