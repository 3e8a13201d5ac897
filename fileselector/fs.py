import os
import logging
import ntpath
import posixpath

logger = logging.getLogger("FileSelector.Fs")


class FsReader:
    """
    Filesystem functions used by the selector.
    Subclass this to browse something other than the local disk.
    """

    def root(self):
        """Path the selector will not navigate above."""
        raise NotImplementedError

    def is_dir(self, path):
        """True only for an existing, reachable directory. Never raises."""
        raise NotImplementedError

    def read_dir(self, directory):
        """Entry names inside `directory`, or an empty list if it cannot be read."""
        raise NotImplementedError

    def path_sep(self):
        raise NotImplementedError


class DefaultFsReader(FsReader):
    """Reads the local filesystem through the os module."""

    def __init__(self, root=None):
        self._root = root

    def root(self):
        if self._root is not None:
            return self._root
        return os.environ.get("SystemDrive", "") + os.sep

    def is_dir(self, path):
        try:
            return os.path.isdir(path)
        except (OSError, ValueError):
            return False

    def read_dir(self, directory):
        try:
            return os.listdir(directory)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read directory {directory}: {e}")
            return []

    def path_sep(self):
        return os.sep


class MemoryFsReader(FsReader):
    """
    In-memory filesystem, mostly for tests.

    `tree` maps a directory path to the names it contains. Every key is a
    directory; anything else is treated as a file.
    """

    def __init__(self, tree=None, root="/", sep="/"):
        self.tree = {k: list(v) for k, v in (tree or {}).items()}
        self._root = root
        self._sep = sep

    def root(self):
        return self._root

    def is_dir(self, path):
        return path in self.tree

    def read_dir(self, directory):
        return list(self.tree.get(directory, []))

    def path_sep(self):
        return self._sep


def path_module(fs_reader):
    """Path helpers matching the separator convention of `fs_reader`."""
    if fs_reader.path_sep() == "\\":
        return ntpath
    return posixpath
