"""Depth-first filesystem walker with a pre-descent visit predicate.

Directories are yielded before their contents and siblings in name order.
A rejected entry is never yielded and, when it is a directory, never
descended into. Per-entry I/O errors are handed to an error policy and the
walk carries on with the next entry.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Callable, FrozenSet, Iterator, List, Optional, Tuple, Union

from fsaudit.scanner.models import Entry, WalkError
from fsaudit.scanner.policies import ErrorHandler, IgnoreErrors

VisitPredicate = Callable[[Entry], bool]

# (st_dev, st_ino) of every directory above the current one, for loop checks.
_Ancestors = FrozenSet[Tuple[int, int]]


def _stat(path: Path, follow_symlinks: bool) -> os.stat_result:
    return os.stat(path, follow_symlinks=follow_symlinks)


def _children(
    parent: Entry,
    ancestors: _Ancestors,
    visit: Optional[VisitPredicate],
    on_error: ErrorHandler,
    follow_symlinks: bool,
) -> Iterator[Tuple[Entry, _Ancestors]]:
    """Yield the accepted children of *parent* in name order.

    Only the names are read up front; each child is stat'ed and checked
    against *visit* when the walk reaches it.
    """
    try:
        with os.scandir(parent.path) as it:
            names = sorted(d.name for d in it)
    except OSError as exc:
        on_error(WalkError.from_os_error(parent.path, exc, parent.depth))
        return

    depth = parent.depth + 1
    for name in names:
        path = parent.path / name
        try:
            st = _stat(path, follow_symlinks)
        except OSError as exc:
            # Dangling symlink, permission denied, or removed since listing
            on_error(WalkError.from_os_error(path, exc, depth))
            continue

        is_dir = stat.S_ISDIR(st.st_mode)
        if is_dir and (st.st_dev, st.st_ino) in ancestors:
            on_error(WalkError(path=path, reason="filesystem loop", depth=depth))
            continue

        entry = Entry(path=path, is_dir=is_dir, depth=depth)
        if visit is not None and not visit(entry):
            continue
        yield entry, (ancestors | {(st.st_dev, st.st_ino)} if is_dir else ancestors)


def walk(
    root: Union[str, Path],
    *,
    visit: Optional[VisitPredicate] = None,
    on_error: Optional[ErrorHandler] = None,
    follow_symlinks: bool = True,
) -> Iterator[Entry]:
    """Lazily yield every entry under *root*, starting with *root* itself.

    A missing or unreadable *root* yields nothing; its error goes to
    *on_error* like any other.
    """
    handler: ErrorHandler = on_error if on_error is not None else IgnoreErrors()
    root_path = Path(root)

    try:
        st = _stat(root_path, follow_symlinks)
    except OSError as exc:
        handler(WalkError.from_os_error(root_path, exc))
        return

    is_dir = stat.S_ISDIR(st.st_mode)
    root_entry = Entry(path=root_path, is_dir=is_dir, depth=0)
    if visit is not None and not visit(root_entry):
        return

    ancestors: _Ancestors = frozenset({(st.st_dev, st.st_ino)}) if is_dir else frozenset()
    # One pending-children iterator per open directory, innermost last.
    stack: List[Iterator[Tuple[Entry, _Ancestors]]] = [iter([(root_entry, ancestors)])]
    while stack:
        pending = next(stack[-1], None)
        if pending is None:
            stack.pop()
            continue
        entry, entry_ancestors = pending
        yield entry
        if entry.is_dir:
            stack.append(_children(entry, entry_ancestors, visit, handler, follow_symlinks))
