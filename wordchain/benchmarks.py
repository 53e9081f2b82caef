"""
Various benchmarks to evaluate chain solvers:

1. chain_coverage_rate:
      Percentage of the input tokens that made it into the chain.
2. invalid_token_rate:
      Percentage of tokens rejected for a non-alphabetic boundary character.
3. forest_statistics:
      Shape of the node forest left behind by a ChainBuilder scan.
4. chain_equivalence:
      Compare the chains found by two solvers on the same tokens.
5. build_performance:
      Measure build time and throughput.
6. benchmarks:
      Run all benchmarks and print a summary of results to the console.
"""

from timeit import default_timer as timer
from typing import Any, Dict, List, Optional, Tuple
from wordchain.utils import ChainResult


def chain_coverage_rate(result: ChainResult) -> float:
    """
    Compute the share of input tokens used by the chain.
    Args:
        result (ChainResult): A solver result.
    Returns:
        float: Chain length over total tokens, as a percentage.
    """
    if not result.total_tokens:
        return 0.0
    return len(result.chain) / result.total_tokens * 100


def invalid_token_rate(solver: Any, tokens: List[str]) -> float:
    """
    Compute the share of tokens rejected by validation.
    Args:
        solver (Any): Solver with an `is_valid` method.
        tokens (List[str]): Input tokens.
    Returns:
        float: Percentage of invalid tokens.
    """
    if not tokens:
        return 0.0
    invalid = sum(1 for token in tokens if not solver.is_valid(token))
    return invalid / len(tokens) * 100


def forest_statistics(builder: Any) -> Dict[str, int]:
    """
    Describe the forest held by a ChainBuilder after a scan.
    Args:
        builder (Any): A ChainBuilder that has processed tokens.
    Returns:
        Dict[str, int]: Live nodes, roots, leaves, allocated and freed slots, registry size.
    """
    nodes = [node for _, node in builder.forest.items()]
    return {
        "live_nodes": len(nodes),
        "roots": sum(1 for node in nodes if node.is_root),
        "leaves": sum(1 for node in nodes if node.is_leaf),
        "allocated_slots": len(builder.forest.slots),
        "freed_slots": builder.forest.freed,
        "registry_size": len(builder.registry),
    }


def chain_equivalence(solver1: Any, solver2: Any, tokens: List[str]) -> Tuple[bool, int, int, float]:
    """
    Compare the chains two solvers find on the same tokens.

    Args:
        solver1 (Any): First solver with a `build` method.
        solver2 (Any): Second solver with a `build` method.
        tokens (List[str]): Input tokens.

    Returns:
        Tuple containing:
            same_length (bool): Both chains have the same length.
            positional_matches (int): Tokens equal at the same chain position.
            positions (int): Positions compared (length of the longer chain).
            positional_rate (float): Percentage of positional matches.
    """
    chain1 = solver1.build(tokens).chain
    chain2 = solver2.build(tokens).chain

    positions = max(len(chain1), len(chain2))
    matches = sum(1 for a, b in zip(chain1, chain2) if a == b)
    rate = (matches / positions * 100) if positions else 100.0

    return len(chain1) == len(chain2), matches, positions, rate


def build_performance(solver: Any, tokens: List[str]) -> Dict[str, float]:
    """
    Measure build speed for a solver.

    Args:
        solver (Any): Solver with a `build` method.
        tokens (List[str]): Input tokens.

    Returns:
        Dict[str, float]: Total time and throughput.
    """
    start_time = timer()
    solver.build(tokens)
    end_time = timer()

    total_time = end_time - start_time
    throughput = len(tokens) / total_time if total_time > 0 else float('inf')

    return {
        "total_time_s": total_time,
        "throughput_tokens_per_s": throughput,
    }


def _report(solver: Any, tokens: List[str]) -> None:
    name = solver.__class__.__name__
    perf = build_performance(solver, tokens)
    result = solver.build(tokens)

    print(f"=== Chain Metrics for {name} ===")
    print(f"Total tokens:       {result.total_tokens}")
    print(f"Chain length:       {len(result.chain)}")
    print(f"Excluded tokens:    {result.excluded}")
    print(f"Chain coverage:     {chain_coverage_rate(result):.2f}%")
    print(f"Invalid tokens:     {invalid_token_rate(solver, tokens):.2f}%")

    if hasattr(solver, "forest"):
        stats = forest_statistics(solver)
        print("\n=== Forest ===")
        print(f"Live nodes:         {stats['live_nodes']}")
        print(f"Roots / leaves:     {stats['roots']} / {stats['leaves']}")
        print(f"Allocated slots:    {stats['allocated_slots']}")
        print(f"Freed slots:        {stats['freed_slots']}")
        print(f"Registry size:      {stats['registry_size']}")

    print("\n=== Build Performance ===")
    print(f"Total time:     {perf['total_time_s']:.4f}s")
    print(f"Throughput:     {perf['throughput_tokens_per_s']:.2f} tokens/s")


def benchmarks(
    solver: Any,
    tokens: List[str],
    reference_solvers: Optional[List[Any]] = None,
    compare_only: bool = False
) -> None:
    """
    Run all benchmark functions and print results to the console.

    Args:
        solver (Any): Primary solver.
        tokens (List[str]): Input tokens.
        reference_solvers (List[Any], optional): Additional solvers for comparison.
        compare_only (bool): Only print chain equivalence against the reference solvers.
    """
    reference_solvers = reference_solvers or []
    name1 = solver.__class__.__name__

    if compare_only:
        if not reference_solvers:
            print("No reference solvers provided for comparison.")
            return
        for other in reference_solvers:
            name2 = other.__class__.__name__
            same_length, matches, positions, rate = chain_equivalence(solver, other, tokens)
            print(f"=== Chain Equivalence ({name1} vs {name2}) ===")
            print(f"Same chain length:   {'yes' if same_length else 'no'}")
            print(f"Positional matches:  {rate:.2f}% ({matches}/{positions})")
        return

    _report(solver, tokens)
    for other in reference_solvers:
        print()
        _report(other, tokens)
