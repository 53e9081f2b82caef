from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple
from tokenizers.pre_tokenizers import WhitespaceSplit


@dataclass
class ChainResult:
    """
    Outcome of a chain search over a token sequence.

    Attributes:
        total_tokens (int): Number of tokens consumed, invalid ones included.
        excluded (int): Tokens left out of the best chain.
        chain (List[str]): Best chain in root-to-leaf order, empty when no chain exists.
    """
    total_tokens: int
    excluded: int
    chain: List[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.chain)


class ChainSolver:
    """A parent class for word chain solvers."""

    def __init__(self, verbose: bool = False) -> None:
        """
        Args:
            verbose (bool): Show a progress bar while scanning tokens.
        """
        self.verbose = verbose
        self.pre_tokenizer = WhitespaceSplit()

    def preprocessing(self, text: str) -> List[str]:
        """
        Split raw text into whitespace-delimited tokens.

        Args:
            text (str): The text to split.

        Returns:
            List[str]: Tokens in input order, original case preserved.
        """
        if not isinstance(text, str):
            raise TypeError("Text to split must be a string.")
        return [token for token, _ in self.pre_tokenizer.pre_tokenize_str(text)]

    @staticmethod
    def is_valid(token: str) -> bool:
        """A token is usable only if both boundary characters are alphabetic."""
        return bool(token) and token[0].isalpha() and token[-1].isalpha()

    @staticmethod
    def boundary(token: str) -> Tuple[str, str]:
        """Return the (initial, terminal) registry keys of a token, case-folded to one character each."""
        return token[0].casefold()[0], token[-1].casefold()[0]

    def _check_tokens(self, tokens: List[str]) -> None:
        if not isinstance(tokens, list) or not all(isinstance(token, str) for token in tokens):
            raise TypeError("Tokens must be a list of strings.")

    def build(self, tokens: List[str]) -> ChainResult:
        raise NotImplementedError

    def solve(self, text: str) -> ChainResult:
        """Split `text` and build the longest chain over its tokens."""
        return self.build(self.preprocessing(text))


class ChainNode:
    """One token placed at a given depth of a candidate chain."""

    __slots__ = ("token", "parent", "depth", "children", "position")

    def __init__(self, token: str, parent: Optional[int], depth: int, position: int) -> None:
        # Token text, shared with the input sequence
        self.token = token
        # Arena index of the predecessor, None for a root
        self.parent = parent
        # Number of tokens from the root to this node, inclusive
        self.depth = depth
        # Terminal character -> arena index of the child
        self.children: Dict[str, int] = {}
        # Index of the token in the input sequence
        self.position = position

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def __repr__(self) -> str:
        return f"ChainNode({self.token!r}, depth={self.depth}, position={self.position})"


class ChainForest:
    """
    Arena of chain nodes addressed by stable integer indices.

    Freed slots are tombstoned and recycled through a free list, so an index
    held by a parent link or a registry entry never points at a reused slot
    while the node it named is still referenced.
    """

    def __init__(self) -> None:
        self.slots: List[Optional[ChainNode]] = []
        self.free_list: List[int] = []
        # Total number of frees, for statistics
        self.freed = 0

    def allocate(self, token: str, parent: Optional[int], position: int) -> int:
        """
        Create a node under `parent` (or a root) and return its index.

        The depth is derived from the parent so the depth invariant holds by construction.
        """
        depth = 1 if parent is None else self[parent].depth + 1
        node = ChainNode(token, parent, depth, position)
        if self.free_list:
            index = self.free_list.pop()
            self.slots[index] = node
        else:
            index = len(self.slots)
            self.slots.append(node)
        return index

    def free(self, index: int) -> None:
        """Release a childless node's slot."""
        node = self[index]
        if node.children:
            raise ValueError(f"Cannot free {node!r}: it still owns children.")
        self.slots[index] = None
        self.free_list.append(index)
        self.freed += 1

    def __getitem__(self, index: int) -> ChainNode:
        node = self.slots[index]
        if node is None:
            raise KeyError(f"Slot {index} has been freed.")
        return node

    def __len__(self) -> int:
        return len(self.slots) - len(self.free_list)

    def items(self) -> Iterator[Tuple[int, ChainNode]]:
        """Iterate over (index, node) for live nodes."""
        for index, node in enumerate(self.slots):
            if node is not None:
                yield index, node

    def path(self, index: int) -> Iterator[ChainNode]:
        """Walk parent links from `index` up to its root."""
        current: Optional[int] = index
        while current is not None:
            node = self[current]
            yield node
            current = node.parent
