# src/tokenlint/core/ignore.py
from typing import List, Optional

import pathspec

from tokenlint.config import GENERATED_SEGMENTS, GENERATED_SUFFIXES


def is_generated(path: str) -> bool:
    """
    True for paths that look like generated code.
    Matches the raw string: 'gen/foo.go' is not generated, '/gen/foo.go' is.
    """
    if any(segment in path for segment in GENERATED_SEGMENTS):
        return True
    return path.endswith(tuple(GENERATED_SUFFIXES))


def load_exclude_spec(patterns: Optional[List[str]] = None) -> Optional[pathspec.PathSpec]:
    """
    Compiles user exclude patterns (gitignore syntax) into a PathSpec.
    Returns None when there is nothing to exclude.
    Raises ValueError if a pattern cannot be parsed.
    """
    if not patterns:
        return None

    try:
        return pathspec.PathSpec.from_lines("gitignore", patterns)
    except ValueError as e:
        raise ValueError(f"invalid exclude pattern: {e}") from e


def is_excluded(path: str, exclude_spec: Optional[pathspec.PathSpec]) -> bool:
    if exclude_spec is None:
        return False
    return exclude_spec.match_file(path)
