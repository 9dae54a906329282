"""Bidirectional mapping between split short ids and positions."""

from collections.abc import Iterator

from ..errors import DuplicateShortError


class ShortMap:
    """
    One-to-one map from short ids to split indices.

    The forward and reverse maps are kept in sync on every insert; neither
    is exposed directly.
    """

    def __init__(self) -> None:
        self._by_short: dict[str, int] = {}
        self._by_index: dict[int, str] = {}

    def insert(self, short: str, index: int) -> None:
        """
        Map ``short`` to ``index``.

        Raises:
            DuplicateShortError: If either side is already mapped
        """
        if short in self._by_short:
            raise DuplicateShortError(f"Short id {short!r} is already mapped")
        if index in self._by_index:
            raise DuplicateShortError(f"Index {index} is already mapped")

        self._by_short[short] = index
        self._by_index[index] = short

    def index_of(self, short: str) -> int | None:
        return self._by_short.get(short)

    def short_at(self, index: int) -> str | None:
        return self._by_index.get(index)

    def __contains__(self, short: object) -> bool:
        return short in self._by_short

    def __len__(self) -> int:
        return len(self._by_short)

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_short)
