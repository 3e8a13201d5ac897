import os
import ntpath
import posixpath
import logging
import pytest
from unittest.mock import patch
from fileselector.fs import DefaultFsReader, FsReader, MemoryFsReader, path_module


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "docs").mkdir()
    (tmp_path / "notes.txt").write_text("hello")
    return tmp_path


def test_is_dir(tree):
    reader = DefaultFsReader()
    assert reader.is_dir(str(tree / "docs")) is True
    assert reader.is_dir(str(tree / "notes.txt")) is False
    assert reader.is_dir(str(tree / "missing")) is False


def test_is_dir_swallows_os_errors():
    reader = DefaultFsReader()
    with patch("os.path.isdir", side_effect=PermissionError("denied")):
        assert reader.is_dir("/anything") is False


def test_read_dir_returns_names(tree):
    reader = DefaultFsReader()
    assert sorted(reader.read_dir(str(tree))) == ["docs", "notes.txt"]


def test_read_dir_unreadable_is_empty(tree, caplog):
    reader = DefaultFsReader()
    with caplog.at_level(logging.WARNING, logger="FileSelector.Fs"):
        assert reader.read_dir(str(tree / "missing")) == []
    assert "Could not read directory" in caplog.text


def test_read_dir_permission_denied_is_empty(tree):
    reader = DefaultFsReader()
    with patch("os.listdir", side_effect=PermissionError("denied")):
        assert reader.read_dir(str(tree)) == []


def test_default_root(monkeypatch):
    monkeypatch.delenv("SystemDrive", raising=False)
    assert DefaultFsReader().root() == os.sep

    monkeypatch.setenv("SystemDrive", "C:")
    assert DefaultFsReader().root() == "C:" + os.sep


def test_root_override(monkeypatch):
    monkeypatch.setenv("SystemDrive", "C:")
    assert DefaultFsReader(root="/srv").root() == "/srv"


def test_path_sep():
    assert DefaultFsReader().path_sep() == os.sep


def test_memory_reader():
    reader = MemoryFsReader({"/": ["a", "b.txt"], "/a": []})
    assert reader.root() == "/"
    assert reader.path_sep() == "/"
    assert reader.is_dir("/a") is True
    assert reader.is_dir("/b.txt") is False
    assert reader.read_dir("/") == ["a", "b.txt"]
    assert reader.read_dir("/nope") == []


def test_memory_reader_returns_copies():
    reader = MemoryFsReader({"/": ["a"]})
    reader.read_dir("/").append("mutated")
    assert reader.read_dir("/") == ["a"]


def test_base_reader_is_abstract():
    reader = FsReader()
    with pytest.raises(NotImplementedError):
        reader.root()
    with pytest.raises(NotImplementedError):
        reader.read_dir("/")


def test_path_module_follows_separator():
    assert path_module(MemoryFsReader(sep="\\")) is ntpath
    assert path_module(MemoryFsReader(sep="/")) is posixpath
