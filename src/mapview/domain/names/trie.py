# mapview/domain/names/trie.py
import re
from enum import IntEnum

_NOT_LETTER_OR_SPACE = re.compile(r"[^a-zA-Z ]")

CharSlot = IntEnum(
    "CharSlot",
    [(chr(ord("A") + i), i) for i in range(26)] + [("OTHER", 26)],
)
CharSlot.__doc__ = "Trie branch slots: one per lowercase letter, everything else shares OTHER."


def clean_string(s: str) -> str:
    """Drop everything but ASCII letters and spaces, then lowercase."""
    return _NOT_LETTER_OR_SPACE.sub("", s).lower()


def slot_of(ch: str) -> CharSlot:
    # space (the only non-letter left after cleaning) collides with any other char in OTHER
    if "a" <= ch <= "z":
        return CharSlot(ord(ch) - ord("a"))
    return CharSlot.OTHER


class _Node:
    __slots__ = ("children", "value", "ids")

    def __init__(self):
        self.children: list[_Node | None] = [None] * len(CharSlot)
        self.value: str | None = None  # display name; set on terminal nodes only
        self.ids: list[int] = []

    @property
    def is_end(self) -> bool:
        return self.value is not None


class PrefixIndex:
    """
    Name trie for autocomplete and exact-name lookup.

    Keys are cleaned strings; a terminal node keeps the latest display name inserted
    for it plus every id sharing that cleaned name. Insert-only.
    """

    def __init__(self):
        self._root = _Node()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, name: str, id: int) -> None:
        node = self._root
        for ch in clean_string(name):
            i = slot_of(ch)
            if node.children[i] is None:
                node.children[i] = _Node()
            node = node.children[i]
        node.value = name
        # a repeated (name, id) pair only refreshes the display name
        if id not in node.ids:
            node.ids.append(id)
            self._size += 1

    def _walk(self, cleaned: str) -> _Node | None:
        node = self._root
        for ch in cleaned:
            node = node.children[slot_of(ch)]
            if node is None:
                return None
        return node

    def search_prefix(self, prefix: str) -> list[str]:
        node = self._walk(clean_string(prefix))
        if node is None:
            return []
        out: list[str] = []
        stack = [node]
        while stack:
            n = stack.pop()
            if n.is_end:
                out.append(n.value)
            # reversed so slot 0 is visited first (pre-order)
            stack.extend(c for c in reversed(n.children) if c is not None)
        return out

    def lookup_exact(self, name: str) -> list[int]:
        node = self._walk(clean_string(name))
        if node is None or not node.is_end:
            return []
        return list(node.ids)
