"""Tests for session module."""

import pytest

from TreeArchitect.session import DEFAULT_ROOT_NAME, TreeSession
from TreeArchitect.tree_mutator import AddressNotFoundError, resolve

PATHS = ["proj/src/main.ts", "proj/readme.md"]


class TestLoad:
    def test_new_session_is_empty(self):
        session = TreeSession()
        assert session.has_tree is False
        assert session.root_name == DEFAULT_ROOT_NAME
        assert session.text_export() is None
        assert session.svg_export() is None

    def test_load_sets_tree_and_name(self):
        session = TreeSession()
        assert session.load(PATHS) is True
        assert session.has_tree
        assert session.tree.name == "proj"
        assert session.root_name == "proj"

    def test_load_empty(self):
        session = TreeSession()
        assert session.load([]) is False
        assert session.has_tree is False

    def test_reload_replaces_tree(self):
        session = TreeSession()
        session.load(PATHS)
        session.set_checked(["src"], False)
        session.load(["other/a.txt"])
        assert session.root_name == "other"
        assert set(session.tree.children) == {"a.txt"}
        assert session.tree.checked is True

    def test_reset(self):
        session = TreeSession()
        session.load(PATHS)
        session.reset()
        assert session.has_tree is False


class TestVersion:
    def test_every_change_bumps_version(self):
        session = TreeSession()
        versions = [session.version]
        session.load(PATHS)
        versions.append(session.version)
        session.set_checked(["readme.md"], False)
        versions.append(session.version)
        session.toggle_expanded(["src"])
        versions.append(session.version)
        session.reset()
        versions.append(session.version)
        assert versions == sorted(set(versions))

    def test_mutation_replaces_tree_reference(self):
        session = TreeSession()
        session.load(PATHS)
        before = session.tree
        session.set_checked(["src"], False)
        assert session.tree is not before
        assert resolve(before, ["src"]).checked is True


class TestMutations:
    def test_set_checked(self):
        session = TreeSession()
        session.load(PATHS)
        session.set_checked(["src"], False)
        assert resolve(session.tree, ["src", "main.ts"]).checked is False

    def test_toggle_expanded(self):
        session = TreeSession()
        session.load(PATHS)
        session.toggle_expanded(["src"])
        assert resolve(session.tree, ["src"]).expanded is False

    def test_mutation_without_tree(self):
        with pytest.raises(AddressNotFoundError):
            TreeSession().set_checked([], False)

    def test_bad_address(self):
        session = TreeSession()
        session.load(PATHS)
        version = session.version
        with pytest.raises(AddressNotFoundError):
            session.toggle_expanded(["lib"])
        assert session.version == version


class TestExports:
    def test_text_reflects_selection(self):
        session = TreeSession()
        session.load(PATHS)
        session.set_checked(["src"], False)
        payload = session.text_export()
        assert payload.file_name == "proj_structure.txt"
        assert payload.data == "proj\n└── readme.md\n".encode("utf-8")

    def test_svg_name(self):
        session = TreeSession()
        session.load(PATHS)
        assert session.svg_export().file_name == "proj_structure.svg"
