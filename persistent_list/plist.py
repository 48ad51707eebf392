from __future__ import annotations
from dataclasses import dataclass, field
from typing import Generic, Iterable, Iterator, TypeVar

from .cons import Cons, ConsList, chains_equal, iter_cons_list

T = TypeVar("T")


@dataclass(frozen=True, eq=False)
class PersistentList(Generic[T]):
    """
    Immutable singly-linked list. Every version stays valid:
    `prepend` allocates one node pointing at the receiver's nodes,
    `rest` hands back a new handle on the nodes after the first.

    `PersistentList()` is the empty list.
    """

    head: ConsList[T] = None

    def __post_init__(self):
        if self.head is not None and not isinstance(self.head, Cons):
            raise TypeError(
                "PersistentList head must be a Cons or None,"
                f" got {type(self.head).__name__}"
            )

    @classmethod
    def new(cls) -> PersistentList[T]:
        return cls()

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> PersistentList[T]:
        """
        Prepends each value as it arrives, so the result is in the
        reverse of the input order
        """
        l: PersistentList[T] = cls()
        for value in values:
            l = l.prepend(value)
        return l

    @property
    def is_empty(self) -> bool:
        return self.head is None

    def prepend(self, value: T) -> PersistentList[T]:
        return PersistentList(Cons(value, self.head))

    def first(self) -> T | None:
        if self.head is None:
            return None
        return self.head.value

    def rest(self) -> PersistentList[T] | None:
        if self.head is None:
            return None
        return PersistentList(self.head.next)

    def __bool__(self) -> bool:
        return not self.is_empty

    def __iter__(self) -> PersistentListIterator[T]:
        return PersistentListIterator(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersistentList):
            return NotImplemented
        return chains_equal(self.head, other.head)

    def __hash__(self) -> int:
        return hash(tuple(iter_cons_list(self.head)))

    def __repr__(self) -> str:
        return "PersistentList([%s])" % ", ".join(
            map(repr, iter_cons_list(self.head))
        )


@dataclass(eq=False)
class PersistentListIterator(Generic[T]):
    """Cursor over a list. Advancing only moves `current`"""

    current: PersistentList[T] = field(default_factory=PersistentList)

    def __iter__(self) -> PersistentListIterator[T]:
        return self

    def __next__(self) -> T:
        if self.current.is_empty:
            raise StopIteration
        value = self.current.first()
        self.current = self.current.rest() or PersistentList()
        return value  # type: ignore[return-value]
