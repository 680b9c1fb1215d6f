"""Helpers for partial updates carried by commands."""

import json


def supplied_changes(command, names):
    """Return ``{name: value}`` for the fields the caller actually supplied.

    Commands carry an optional ``fields_set`` JSON list naming the keys that
    were present in the request, so an explicit ``null`` can clear a field.
    Without it, only non-null values count as supplied.
    """
    fields_set = getattr(command, "fields_set", None)
    if fields_set:
        present = set(json.loads(fields_set) if isinstance(fields_set, str) else fields_set)
        return {name: getattr(command, name) for name in names if name in present}
    return {name: getattr(command, name) for name in names if getattr(command, name) is not None}
