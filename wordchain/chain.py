import logging
from enum import Enum
from typing import Dict, List, Optional
from tqdm import tqdm
from wordchain.utils import ChainForest, ChainNode, ChainResult, ChainSolver

logger = logging.getLogger(__name__)


class TokenOutcome(Enum):
    """Terminal state of a single token after `ChainBuilder.process`."""
    INVALID = "invalid"
    REDUNDANT = "redundant"
    REGISTERED = "registered"
    SUPERSEDED = "superseded"


class ChainBuilder(ChainSolver):
    """
    One-pass longest word chain builder.

    Keeps, for every terminal character, the deepest chain seen so far that ends
    with it (the registry), on top of a forest of nodes linked to their parents.
    Each token is looked at exactly once.
    """

    def __init__(self, verbose: bool = False) -> None:
        super().__init__(verbose)
        self.forest = ChainForest()
        self.registry: Dict[str, int] = {}
        self.total_tokens = 0

    def reset(self) -> None:
        """Reset all scan state."""
        self.forest = ChainForest()
        self.registry = {}
        self.total_tokens = 0

    def process(self, token: str) -> TokenOutcome:
        """
        Consume the next token of the input sequence.

        Args:
            token (str): The token, in input order.

        Returns:
            TokenOutcome: What happened to the token.
        """
        if not isinstance(token, str):
            raise TypeError("Token must be a string.")

        position = self.total_tokens
        self.total_tokens += 1

        # 1. Validation
        if not self.is_valid(token):
            logger.warning("Invalid token at position %d: %r", position, token)
            return TokenOutcome.INVALID

        initial, terminal = self.boundary(token)

        # 2. Attach to the deepest chain ending with our initial character
        parent = self.registry.get(initial)
        if parent is not None:
            siblings = self.forest[parent].children
            if terminal in siblings:
                # An earlier token already continues this parent towards `terminal`
                logger.debug("Redundant token at position %d: %r", position, token)
                return TokenOutcome.REDUNDANT
            index = self.forest.allocate(token, parent, position)
            siblings[terminal] = index
        else:
            # 3. Nothing to plug into, root candidate
            index = self.forest.allocate(token, None, position)

        # 4. Compete for the terminal character's registry slot
        node = self.forest[index]
        incumbent = self.registry.get(terminal)
        incumbent_depth = 0 if incumbent is None else self.forest[incumbent].depth

        if node.depth > incumbent_depth:
            self.registry[terminal] = index
            if incumbent is not None:
                self._release_orphan(incumbent)
            return TokenOutcome.REGISTERED

        if parent is not None:
            del self.forest[parent].children[terminal]
        self.forest.free(index)
        return TokenOutcome.SUPERSEDED

    def _release_orphan(self, index: int) -> None:
        """Free a node dropped from the registry if nothing else references it."""
        node = self.forest[index]
        # Non-roots stay owned by their parent's children map
        if node.is_root and node.is_leaf:
            self.forest.free(index)

    def select(self) -> Optional[ChainNode]:
        """
        Pick the end of the longest chain.

        Only leaves are candidates: a node with a child is always outdone by that child.
        Ties on depth go to the token seen earliest in the input.

        Returns:
            Optional[ChainNode]: The selected leaf, or None when no valid token was processed.
        """
        leaves = [self.forest[index] for index in self.registry.values() if self.forest[index].is_leaf]
        if not leaves:
            return None
        return min(leaves, key=lambda node: (-node.depth, node.position))

    def reconstruct(self, leaf: ChainNode) -> List[str]:
        """
        Rebuild the chain ending at `leaf`, in root-to-leaf order.

        Args:
            leaf (ChainNode): Last node of the chain.

        Returns:
            List[str]: `leaf.depth` tokens.
        """
        tokens = [leaf.token]
        if leaf.parent is not None:
            tokens.extend(node.token for node in self.forest.path(leaf.parent))
        tokens.reverse()
        return tokens

    def result(self) -> ChainResult:
        """Summarize the current scan state."""
        leaf = self.select()
        if leaf is None:
            logger.info("No valid token among %d, no chain.", self.total_tokens)
        chain = self.reconstruct(leaf) if leaf is not None else []
        return ChainResult(self.total_tokens, self.total_tokens - len(chain), chain)

    def build(self, tokens: List[str]) -> ChainResult:
        """
        Find the longest chain over a token sequence.

        Args:
            tokens (List[str]): Tokens in input order.

        Returns:
            ChainResult: Token count, excluded count and the chain.
        """
        self._check_tokens(tokens)
        self.reset()

        for token in tqdm(tokens, desc="Building chain", disable=not self.verbose):
            self.process(token)

        return self.result()


class NaiveChainBuilder(ChainSolver):
    """
    Quadratic reference solver.

    For every valid token, scans all earlier tokens for the deepest compatible
    predecessor. Slow, but obviously correct; used to cross-check `ChainBuilder`.
    """

    def build(self, tokens: List[str]) -> ChainResult:
        self._check_tokens(tokens)

        # depths[i] == 0 marks an invalid token
        depths: List[int] = []
        parents: List[Optional[int]] = []
        terminals: List[str] = []

        for i, token in enumerate(tqdm(tokens, desc="Building chain (naive)", disable=not self.verbose)):
            if not self.is_valid(token):
                logger.warning("Invalid token at position %d: %r", i, token)
                depths.append(0)
                parents.append(None)
                terminals.append("")
                continue

            initial, terminal = self.boundary(token)
            best_depth, best_parent = 0, None
            for j in range(i):
                # Strict comparison keeps the earliest predecessor on ties
                if depths[j] and terminals[j] == initial and depths[j] > best_depth:
                    best_depth, best_parent = depths[j], j

            depths.append(best_depth + 1)
            parents.append(best_parent)
            terminals.append(terminal)

        total = len(tokens)
        if not any(depths):
            return ChainResult(total, total, [])

        # list.index returns the earliest token reaching the maximum depth
        current: Optional[int] = depths.index(max(depths))
        chain = []
        while current is not None:
            chain.append(tokens[current])
            current = parents[current]
        chain.reverse()

        return ChainResult(total, total - len(chain), chain)
