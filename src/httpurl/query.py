"""src/httpurl/query.py

Multivalued query parameter mapping for httpurl.
"""

import urllib.parse
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from httpurl.utils.serialization import to_text

__all__ = ["QueryParams"]


class QueryParams(Mapping[str, str]):
    """
    Ordered mapping of query keys to lists of values.

    Keys are case-sensitive and keep their first-insertion order; values for
    the same key keep their insertion order. Item access returns the first
    value for a key, ``get_all()`` returns every value.
    """

    __slots__ = ("_params",)

    def __init__(
        self,
        params: Optional[
            Union[Mapping[str, Union[Any, List[Any]]], Iterable[Tuple[str, Any]]]
        ] = None,
    ):
        self._params: Dict[str, List[str]] = {}
        if params is None:
            return
        if isinstance(params, QueryParams):
            params = params.items_all()
        if isinstance(params, Mapping):
            for k, v in params.items():
                # Support both single values and lists
                if isinstance(v, list):
                    for item in v:
                        self.add(k, item)
                else:
                    self.add(k, v)
        else:
            for k, v in params:
                self.add(k, v)

    @classmethod
    def parse(cls, query: str) -> "QueryParams":
        """
        Decode a raw query string.

        Blank values are kept, so ``a=&b`` yields ``a`` and ``b`` with empty
        values.
        """
        return cls(urllib.parse.parse_qsl(query, keep_blank_values=True))

    def __getitem__(self, key: str) -> str:
        values = self._params.get(key)
        if not values:
            raise KeyError(key)
        return values[0]

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return f"QueryParams({self.items_all()!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryParams):
            return self.items_all() == other.items_all()
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def get_all(self, key: str) -> List[str]:
        """
        Get all values of a key.

        Args:
            key: Query key (case-sensitive).

        Returns:
            Copy of the list of values, empty list if not found.
        """
        return list(self._params.get(key, []))

    def items_all(self) -> List[Tuple[str, str]]:
        """Flatten to ``(key, value)`` pairs in encoding order."""
        return [(k, v) for k, values in self._params.items() for v in values]

    def add(self, key: str, value: Any) -> None:
        """Append a value to ``key``, keeping existing values."""
        self._params.setdefault(key, []).append(to_text(value))

    def set(self, key: str, value: Any) -> None:
        """Replace every value of ``key`` with a single value."""
        # assignment keeps an existing key's position
        self._params[key] = [to_text(value)]

    def remove(self, key: str) -> None:
        """Drop every value of ``key``. Missing keys are ignored."""
        self._params.pop(key, None)

    def clear(self) -> None:
        self._params.clear()

    def copy(self) -> "QueryParams":
        new = QueryParams()
        new._params = {k: list(v) for k, v in self._params.items()}
        return new

    def encode(self) -> str:
        """Render the canonical ``application/x-www-form-urlencoded`` string."""
        return urllib.parse.urlencode(self.items_all())
