"""Tests for the depth-first walker and its error policies."""

import logging
import os
from pathlib import Path

import pytest

from fsaudit.scanner.models import Entry, WalkError
from fsaudit.scanner.policies import CollectErrors, IgnoreErrors
from fsaudit.scanner.walker import walk


def _rel(root: Path, entries) -> list[str]:
    return [e.path.relative_to(root).as_posix() if e.path != root else "." for e in entries]


def _symlink(link: Path, target: Path, is_dir: bool = False) -> None:
    try:
        link.symlink_to(target, target_is_directory=is_dir)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported here")


class TestOrder:
    def test_preorder_depth_first(self, make_tree):
        root = make_tree({
            "a/x.txt": "",
            "a/b/y.txt": "",
            "c.txt": "",
            "d": None,
        })
        assert _rel(root, walk(root)) == [".", "a", "a/b", "a/b/y.txt", "a/x.txt", "c.txt", "d"]

    def test_directory_flag_and_depth(self, make_tree):
        root = make_tree({"a/b.txt": ""})
        entries = {e.path.name: e for e in walk(root)}
        assert entries["a"].is_dir is True and entries["a"].depth == 1
        assert entries["b.txt"].is_dir is False and entries["b.txt"].depth == 2
        assert entries[root.name].depth == 0

    def test_file_root(self, make_tree):
        root = make_tree({"only.pdf": "x"})
        entries = list(walk(root / "only.pdf"))
        assert entries == [Entry(path=root / "only.pdf", is_dir=False, depth=0)]

    def test_restartable(self, make_tree):
        root = make_tree({"a/b.txt": "", "c.txt": ""})
        assert list(walk(root)) == list(walk(root))

    def test_lazy(self, make_tree):
        root = make_tree({"a/b.txt": ""})
        it = walk(root)
        assert next(it).path == root
        (root / "late.txt").write_text("")
        # root's children are listed after root is yielded
        assert "late.txt" in _rel(root, it)

    def test_siblings_stated_on_demand(self, make_tree):
        root = make_tree({"a.pdf": "", "b.pdf": "", "c.pdf": ""})
        policy = CollectErrors()
        it = walk(root, on_error=policy)
        assert next(it).path == root
        assert next(it).path == root / "a.pdf"
        (root / "c.pdf").unlink()
        # c.pdf was listed but not yet stat'ed, so its removal is a skip
        assert _rel(root, it) == ["b.pdf"]
        assert policy.paths == [str(root / "c.pdf")]

    def test_predicate_called_on_demand(self, make_tree):
        root = make_tree({"a.pdf": "", "b.pdf": ""})
        seen = []

        def visit(entry: Entry) -> bool:
            seen.append(entry.path.name)
            return True

        it = walk(root, visit=visit)
        next(it)
        next(it)
        assert seen == [root.name, "a.pdf"]


class TestMissingRoot:
    def test_nonexistent_root_is_empty(self, tmp_path: Path):
        assert list(walk(tmp_path / "missing")) == []

    def test_nonexistent_root_reported_to_policy(self, tmp_path: Path):
        policy = CollectErrors()
        list(walk(tmp_path / "missing", on_error=policy))
        assert policy.paths == [str(tmp_path / "missing")]


class TestVisitPredicate:
    def test_rejected_subtree_pruned(self, make_tree):
        root = make_tree({"keep/a.txt": "", "skip/b.txt": "", "skip/deep/c.txt": ""})
        entries = _rel(root, walk(root, visit=lambda e: e.name != "skip"))
        assert entries == [".", "keep", "keep/a.txt"]

    def test_predicate_sees_entries_before_descent(self, make_tree):
        root = make_tree({"a/b/c.txt": ""})
        seen: list[str] = []

        def visit(entry: Entry) -> bool:
            seen.append(entry.name)
            return entry.name != "b"

        list(walk(root, visit=visit))
        assert "b" in seen
        assert "c.txt" not in seen

    def test_rejected_root_yields_nothing(self, make_tree):
        root = make_tree({"a.txt": ""})
        assert list(walk(root, visit=lambda e: e.depth > 0)) == []

    def test_rejected_file(self, make_tree):
        root = make_tree({"a.txt": "", "b.txt": ""})
        assert _rel(root, walk(root, visit=lambda e: e.name != "a.txt")) == [".", "b.txt"]


class TestSymlinks:
    def test_follows_directory_links(self, make_tree):
        root = make_tree({"real/data.csv": "a,b,c"})
        _symlink(root / "link", root / "real", is_dir=True)
        entries = _rel(root, walk(root))
        assert "link/data.csv" in entries
        assert next(e for e in walk(root) if e.name == "link").is_dir is True

    def test_dangling_link_skipped(self, make_tree):
        root = make_tree({"a.txt": ""})
        _symlink(root / "dangling", root / "nowhere")
        policy = CollectErrors()
        entries = _rel(root, walk(root, on_error=policy))
        assert entries == [".", "a.txt"]
        assert policy.paths == [str(root / "dangling")]

    def test_loop_detected(self, make_tree):
        root = make_tree({"a/file.txt": ""})
        _symlink(root / "a" / "back", root, is_dir=True)
        policy = CollectErrors()
        entries = _rel(root, walk(root, on_error=policy))
        assert entries == [".", "a", "a/file.txt"]
        assert [e.reason for e in policy.errors] == ["filesystem loop"]

    def test_no_follow(self, make_tree):
        root = make_tree({"real/x.txt": ""})
        _symlink(root / "link", root / "real", is_dir=True)
        entries = _rel(root, walk(root, follow_symlinks=False))
        assert "link" in entries
        assert "link/x.txt" not in entries


@pytest.mark.skipif(os.name == "nt" or not hasattr(os, "geteuid") or os.geteuid() == 0,
                    reason="needs POSIX permissions as a non-root user")
class TestPermissionDenied:
    def test_unreadable_directory_skipped(self, make_tree):
        root = make_tree({"locked/secret.env": "", "open/a.txt": ""})
        (root / "locked").chmod(0)
        try:
            policy = CollectErrors()
            entries = _rel(root, walk(root, on_error=policy))
        finally:
            (root / "locked").chmod(0o755)
        assert entries == [".", "locked", "open", "open/a.txt"]
        assert policy.paths == [str(root / "locked")]


class TestPolicies:
    def test_ignore_counts_and_logs(self, caplog):
        policy = IgnoreErrors()
        with caplog.at_level(logging.DEBUG, logger="fsaudit"):
            policy(WalkError(path=Path("/x"), reason="permission denied"))
        assert policy.count == 1
        assert "permission denied" in caplog.text

    def test_collect(self):
        policy = CollectErrors()
        policy(WalkError(path=Path("/x"), reason="gone"))
        assert policy.count == 1
        assert policy.errors[0].reason == "gone"

    def test_from_os_error(self):
        err = WalkError.from_os_error(Path("/x"), PermissionError(13, "Permission denied"))
        assert err.reason == "Permission denied"
