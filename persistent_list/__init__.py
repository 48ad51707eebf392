from .cons import Cons, ConsList, chains_equal, iter_cons_list
from .plist import PersistentList, PersistentListIterator

__all__ = [
    "Cons",
    "ConsList",
    "PersistentList",
    "PersistentListIterator",
    "chains_equal",
    "iter_cons_list",
]
