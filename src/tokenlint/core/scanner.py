# src/tokenlint/core/scanner.py
import sys
import os
import logging
from typing import Iterator, List, Optional, Sequence, Tuple

import pathspec

from tokenlint.config import RECURSIVE_CWD, RECURSIVE_SUFFIX, SOURCE_EXTENSION
from tokenlint.core.ignore import is_excluded, is_generated
from tokenlint.models import FileResult
from tokenlint.utils.tokenizer import estimate_tokens

logger = logging.getLogger(__name__)


def _raise_walk_error(err: OSError) -> None:
    raise err


def _walk_source_files(root: str, exclude_spec: Optional[pathspec.PathSpec]) -> Iterator[str]:
    """
    Walks the tree under root in lexical order and yields source files,
    skipping generated and excluded paths. Any walk error aborts the scan.
    """
    if os.path.isfile(root):
        # A file root walks to itself
        candidates: Iterator[str] = iter([os.path.normpath(root)])
    else:
        candidates = _walk_files(root)

    for path in candidates:
        if not path.endswith(SOURCE_EXTENSION):
            continue
        if is_generated(path):
            logger.debug("Skipping generated file: %s", path)
            continue
        if is_excluded(path, exclude_spec):
            logger.debug("Skipping excluded file: %s", path)
            continue
        yield path


def _walk_files(root: str) -> Iterator[str]:
    # walk errors abort the scan
    for dirpath, dirs, files in os.walk(root, onerror=_raise_walk_error):
        dirs.sort()
        for name in sorted(files):
            yield os.path.normpath(os.path.join(dirpath, name))


def _list_source_files(directory: str) -> List[str]:
    """Immediate source files of a directory. Generated files are not filtered here."""
    found = []
    with os.scandir(directory) as entries:
        for entry in sorted(entries, key=lambda e: e.name):
            if entry.is_dir():
                continue
            if entry.name.endswith(SOURCE_EXTENSION):
                found.append(os.path.normpath(os.path.join(directory, entry.name)))
    return found


def expand_args(args: Sequence[str], exclude_spec: Optional[pathspec.PathSpec] = None) -> List[str]:
    """
    Expands CLI path arguments into the files to analyze, in argument order.

    - './...'    recursive scan of the current directory
    - 'dir/...'  recursive scan of dir
    - 'dir'      immediate source files of dir
    - anything else is taken as a file path, unchecked

    Raises OSError if a directory cannot be walked or listed.
    """
    files: List[str] = []

    for arg in args:
        if arg == RECURSIVE_CWD:
            files.extend(_walk_source_files(".", exclude_spec))
        elif arg.endswith(RECURSIVE_SUFFIX):
            root = arg[: -len(RECURSIVE_SUFFIX)]
            files.extend(_walk_source_files(root, exclude_spec))
        elif os.path.isdir(arg):
            files.extend(_list_source_files(arg))
        else:
            files.append(arg)

    logger.debug("Expanded %d argument(s) into %d file(s)", len(args), len(files))
    return files


def analyze_files(files: Sequence[str], threshold: int, ratio: float) -> Tuple[List[FileResult], List[FileResult]]:
    """
    Estimates tokens for each file. Returns (all results, violations) in input order.
    Unreadable files are reported on stderr and left out of both lists.
    """
    results: List[FileResult] = []
    violations: List[FileResult] = []

    for path in files:
        try:
            with open(path, "rb") as f:
                content = f.read()
        except OSError as e:
            print(f"warning: {e}", file=sys.stderr)
            continue

        chars = len(content)
        result = FileResult(path=path, chars=chars, tokens=estimate_tokens(chars, ratio))
        results.append(result)

        if result.tokens > threshold:
            violations.append(result)

    return results, violations
