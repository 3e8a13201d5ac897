from .config import Labels, get_default_labels, set_default_labels, reset_default_labels, load_labels
from .exceptions import (
    FileSelectorError,
    PathResolutionError,
    IndexOutOfRange,
    SelectorClosedError,
    ConfigError,
    DependencyError,
)
from .fs import FsReader, DefaultFsReader, MemoryFsReader
from .navigator import FileSelector, Purpose, PARENT_ENTRY

__version__ = "0.1.0"


def open_file_selector(path, fs_reader=None, **kwargs):
    return FileSelector.open(path, fs_reader, **kwargs)


def save_file_selector(path, fs_reader=None, **kwargs):
    return FileSelector.save(path, fs_reader, **kwargs)
