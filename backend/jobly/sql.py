from collections.abc import Mapping
from typing import Any

from jobly.errors import ValidationError


class SqlFragments:
    """Ordered SQL fragments and the positional parameters they reference.

    Each fragment's ``{}`` markers are replaced by SQLite numbered
    placeholders (``?1``, ``?2``, ...) as the fragment is added, so the
    rendered text and the value list can never disagree on count or order.
    A fragment added without values is a literal and consumes no position.
    """

    def __init__(self, start: int = 1):
        self._start = start
        self._parts: list[str] = []
        self._values: list[Any] = []

    def __len__(self) -> int:
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)

    @property
    def next_position(self) -> int:
        return self._start + len(self._values)

    def add(self, text: str, *values: Any) -> "SqlFragments":
        if text.count("{}") != len(values):
            raise ValueError(
                f"Fragment {text!r} has {text.count('{}')} markers for {len(values)} values"
            )
        placeholders = []
        for value in values:
            placeholders.append(f"?{self.next_position}")
            self._values.append(value)
        self._parts.append(text.format(*placeholders))
        return self

    def render(self, separator: str) -> tuple[str, list[Any]]:
        return separator.join(self._parts), list(self._values)


def sql_for_partial_update(
    data: Mapping[str, Any], column_map: Mapping[str, str]
) -> tuple[str, list[Any]]:
    """Build the SET clause for a partial update.

    ``column_map`` is the fixed allowlist of updatable fields and their
    column names; any key in ``data`` outside it is rejected, so caller keys
    never reach the SQL text.

    {"first_name": "Aliya", "age": 32} -> ('"first_name"=?1, "age"=?2', ["Aliya", 32])

    Raises:
        ValidationError: ``data`` is empty or names a field that cannot be updated.
    """
    if not data:
        raise ValidationError("No data")

    fragments = SqlFragments()
    for field, value in data.items():
        column = column_map.get(field)
        if column is None:
            raise ValidationError(f"Field cannot be updated: {field}")
        fragments.add(f'"{column}"={{}}', value)

    return fragments.render(", ")
