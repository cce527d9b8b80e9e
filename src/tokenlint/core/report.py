# src/tokenlint/core/report.py
from typing import List, Optional, TextIO

from tokenlint.config import EXCEEDS_MARKER, REMEDIATION_HINT
from tokenlint.models import FileResult


def print_all_results(results: List[FileResult], threshold: int, out: Optional[TextIO] = None) -> None:
    """Prints every result as a table, in the order given (callers sort by tokens)."""
    print(f"{'FILE':<60} {'TOKENS':>8} {'CHARS':>8}", file=out)
    print("-" * 78, file=out)
    for r in results:
        marker = EXCEEDS_MARKER if r.tokens > threshold else ""
        print(f"{r.path:<60} {r.tokens:>8} {r.chars:>8}{marker}", file=out)
    print(file=out)


def print_violations(violations: List[FileResult], threshold: int, out: Optional[TextIO] = None) -> None:
    print(f"{len(violations)} file(s) exceed {threshold} token threshold:\n", file=out)
    for v in violations:
        pct = v.tokens / threshold * 100
        print(f"  {v.path}", file=out)
        print(f"    ~{v.tokens} tokens ({pct:.0f}% of limit, {v.chars} chars)", file=out)
        print(f"    {REMEDIATION_HINT}\n", file=out)


def print_summary(file_count: int, threshold: int, out: Optional[TextIO] = None) -> None:
    print(f"All {file_count} files under {threshold} token threshold", file=out)


def report(results: List[FileResult], violations: List[FileResult], threshold: int,
           show_all: bool = False, out: Optional[TextIO] = None) -> int:
    """
    Prints the report for already-sorted results and returns the exit status:
    1 if any file exceeds the threshold, else 0.
    """
    if show_all:
        print_all_results(results, threshold, out)

    if violations:
        print_violations(violations, threshold, out)
        return 1

    if not show_all:
        print_summary(len(results), threshold, out)
    return 0
