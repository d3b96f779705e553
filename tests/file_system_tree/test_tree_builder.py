"""Unit tests for building and converting the JSON directory tree."""

import json
import logging

import pytest

from rcat.exceptions import DirectoryReadError
from rcat.exclusion_rules import NameExclusionRules
from rcat.file_system_tree import FILES_KEY, FileSystemNode, build_tree, list_entries, to_mapping


def test_build_tree_structure(proj):
    root = build_tree(proj, NameExclusionRules())
    assert root.name == "proj"
    assert root.is_dir
    assert root.file_names == ["a.rs", "b.txt"]
    assert [node.name for node in root.subdirectories] == ["sub"]


def test_build_tree_without_rules_keeps_everything(proj):
    (proj / ".gitignore").write_text("*.o\n")
    root = build_tree(proj)
    assert ".gitignore" in root.file_names


def test_build_tree_applies_exclusion_to_each_child(proj):
    (proj / "sub" / "Cargo.lock").write_text("# lock\n")
    (proj / "sub" / "target").mkdir()
    (proj / "sub" / "target" / "debug.bin").write_text("0\n")

    mapping = to_mapping(build_tree(proj, NameExclusionRules()))

    assert mapping["sub"] == {"files": ["c.rs"]}


def test_build_tree_excluded_root_name_is_not_checked(tmp_path):
    # Exclusion applies to entries, never to the directory being described
    root_dir = tmp_path / "target"
    root_dir.mkdir()
    (root_dir / "main.rs").write_text("fn main() {}\n")

    mapping = to_mapping(build_tree(root_dir, NameExclusionRules()))

    assert mapping == {"files": ["main.rs"]}


def test_build_tree_on_file_root(proj):
    root = build_tree(proj / "a.rs", NameExclusionRules())
    assert root.is_dir
    assert root.children == ()
    assert to_mapping(root) == {"files": []}


@pytest.mark.parametrize("depth, expected", [(0, {"files": ["a.rs", "b.txt"]}), (1, None)])
def test_build_tree_depth(proj, depth, expected):
    (proj / "sub" / "deeper").mkdir()
    (proj / "sub" / "deeper" / "d.rs").write_text("fn d() {}\n")

    mapping = to_mapping(build_tree(proj, NameExclusionRules(), max_depth=depth))

    if expected is not None:
        assert mapping == expected
    else:
        assert mapping["sub"] == {"files": ["c.rs"]}


def test_empty_subdirectory_has_empty_file_list(proj):
    (proj / "empty").mkdir()
    assert to_mapping(build_tree(proj))["empty"] == {"files": []}


def test_files_key_collision_keeps_file_list(proj, caplog):
    (proj / "files").mkdir()
    (proj / "files" / "inner.txt").write_text("x\n")
    caplog.set_level(logging.WARNING, logger="rcat")

    mapping = to_mapping(build_tree(proj))

    assert mapping[FILES_KEY] == ["a.rs", "b.txt"]
    assert "collides" in caplog.text


def test_mapping_round_trips_through_json(proj):
    mapping = to_mapping(build_tree(proj, NameExclusionRules()))
    assert json.loads(json.dumps(mapping)) == mapping


def test_list_entries_sorted(tmp_path):
    for name in ["b", "a", "C"]:
        (tmp_path / name).write_text("")
    assert [entry.name for entry in list_entries(tmp_path)] == ["C", "a", "b"]


def test_list_entries_failure(tmp_path):
    with pytest.raises(DirectoryReadError) as exc_info:
        list_entries(tmp_path / "missing")
    assert isinstance(exc_info.value.cause, FileNotFoundError)


def test_nodes_keep_attachment_order():
    root = FileSystemNode("root", is_dir=True)
    FileSystemNode("z.txt", parent=root)
    FileSystemNode("sub", parent=root, is_dir=True)
    FileSystemNode("a.txt", parent=root)
    assert root.file_names == ["z.txt", "a.txt"]
    assert [node.name for node in root.subdirectories] == ["sub"]
