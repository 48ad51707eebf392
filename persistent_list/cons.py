from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

T = TypeVar("T", covariant=True)

type ConsList[T] = Cons[T] | None


@dataclass(frozen=True, eq=False, repr=False)
class Cons(Generic[T]):
    """
    One node. Compares and hashes by identity, element-wise
    comparison of whole chains is `chains_equal`
    """

    value: T
    next: ConsList[T]

    def __post_init__(self):
        # Type check on `next` only, cycles can't be built from outside
        if self.next is not None and not isinstance(self.next, Cons):
            raise TypeError(
                "Cons next must be a Cons or None,"
                f" got {type(self.next).__name__}"
            )

    def __repr__(self) -> str:
        values = list(iter_cons_list(self))
        return (
            "".join(f"Cons({v!r}, " for v in values)
            + "None"
            + ")" * len(values)
        )


def iter_cons_list[T](l: ConsList[T]) -> Iterator[T]:
    while l is not None:
        yield l.value
        l = l.next


def chains_equal(a: ConsList[object], b: ConsList[object]) -> bool:
    """
    Elementwise comparison. Stops early once both sides reach
    the same node, since everything after a shared node is shared
    """
    while a is not b:
        match a, b:
            case Cons(value=x, next=a_next), Cons(value=y, next=b_next):
                if x != y:
                    return False
                a, b = a_next, b_next
            case _:
                # Exactly one of them has run out
                return False
    return True
