"""
Reading token sequences and writing chain results.

Input can be a literal string, a text file (split on whitespace, e.g. a
text3.in word list) or a .json file holding a list of strings.
Output is either the plain three-part format (total, excluded, one chain token
per line) or a .json object with the same fields.
"""

import json
import os
from typing import List
from wordchain.utils import ChainResult, ChainSolver


def read_tokens(source: str, solver: ChainSolver) -> List[str]:
    """
    Load the token sequence from a string, a text file or a .json file.

    Args:
        source (str): Literal text, or a path to a .txt/.json file.
        solver (ChainSolver): Solver whose `preprocessing` splits the text.

    Returns:
        List[str]: Tokens in input order.

    Raises:
        FileNotFoundError: When `source` names a file that does not exist.
    """
    if source.lower().endswith(".json"):
        if not os.path.isfile(source):
            raise FileNotFoundError(f"Input file not found: {source}")
        with open(source, "r", encoding="utf-8") as f:
            examples = json.load(f)
        if not isinstance(examples, list) or not all(isinstance(example, str) for example in examples):
            raise TypeError(f"{source} must contain a list of strings.")
        return [token for example in examples for token in solver.preprocessing(example)]

    if os.path.isfile(source):
        with open(source, "r", encoding="utf-8") as f:
            return solver.preprocessing(f.read())

    if _looks_like_path(source):
        raise FileNotFoundError(f"Input file not found: {source}")

    return solver.preprocessing(source)


def _looks_like_path(source: str) -> bool:
    """A single whitespace-free word with a path separator or a file extension."""
    if not source or any(ch.isspace() for ch in source):
        return False
    if os.sep in source or "/" in source:
        return True
    _, extension = os.path.splitext(source)
    return len(extension) > 1 and extension[1:].isalnum()


def format_result(result: ChainResult) -> str:
    """Render a result as total, excluded and the chain, one value per line."""
    lines = [str(result.total_tokens), str(result.excluded)] + result.chain
    return "\n".join(lines) + "\n"


def write_result(result: ChainResult, path: str) -> None:
    """
    Write a result to `path`, as JSON if the path ends in .json.

    Args:
        result (ChainResult): The result to save.
        path (str): Destination file; parent directories are created.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        if path.lower().endswith(".json"):
            json.dump(
                {"total_tokens": result.total_tokens, "excluded": result.excluded, "chain": result.chain},
                f,
                ensure_ascii=False,
                indent=2
            )
        else:
            f.write(format_result(result))
