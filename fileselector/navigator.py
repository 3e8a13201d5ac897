import os
import enum
import logging
import posixpath
from typing import Callable, Optional

from .config import Labels, get_default_labels
from .exceptions import IndexOutOfRange, PathResolutionError, SelectorClosedError
from .fs import DefaultFsReader, path_module

logger = logging.getLogger("FileSelector.Navigator")

PARENT_ENTRY = ".."


class Purpose(enum.Enum):
    OPEN = "open"
    SAVE = "save"


class FileSelector:
    """
    All the state of a file selector dialog.

    The selector does not draw anything. A rendering surface reads
    `current_directory`, `listing` and `label()` every frame, reports list
    clicks through `activate_index`, and calls `choose()` / `close()` when the
    dialog buttons are pressed.
    """

    def __init__(
        self,
        path,
        purpose=Purpose.OPEN,
        fs_reader=None,
        labels: Optional[Labels] = None,
        on_choose_pressed: Optional[Callable[[str, str], None]] = None,
        on_close_pressed: Optional[Callable[[], None]] = None,
    ):
        self.path = path
        self.purpose = Purpose(purpose)
        self.fs_reader = fs_reader if fs_reader is not None else DefaultFsReader()
        self.labels = labels
        self.on_choose_pressed = on_choose_pressed
        self.on_close_pressed = on_close_pressed

        self.selection = ""
        self.selected_index = -1
        self.current_directory = ""
        self.listing = []
        self.closed = False

        self.rebuild(path)

    @classmethod
    def open(cls, path, fs_reader=None, **kwargs):
        """Create a selector for picking an existing file."""
        return cls(path, Purpose.OPEN, fs_reader, **kwargs)

    @classmethod
    def save(cls, path, fs_reader=None, **kwargs):
        """Create a selector for picking a save location."""
        return cls(path, Purpose.SAVE, fs_reader, **kwargs)

    @property
    def _paths(self):
        return path_module(self.fs_reader)

    def _labels(self):
        return self.labels or get_default_labels()

    def _ensure_open(self):
        if self.closed:
            raise SelectorClosedError("Selector has already been dismissed")

    def label(self):
        return f"{self.choose_text()} File"

    def choose_text(self):
        labels = self._labels()
        if self.purpose == Purpose.SAVE:
            return labels.save
        return labels.open

    def close_text(self):
        return self._labels().close

    def resolve(self, path):
        """Normalize `path` to an absolute path in the reader's path flavour."""
        try:
            raw = os.fspath(path)
        except TypeError:
            raw = None
        if not isinstance(raw, str):
            raise PathResolutionError(
                f"Path must be a string, got {type(path).__name__}", path=path
            )
        if "\x00" in raw:
            raise PathResolutionError("Path contains a NUL byte", path=path)
        try:
            resolved = self._paths.abspath(raw)
        except (OSError, ValueError) as e:
            raise PathResolutionError(f"Cannot resolve path {raw!r}: {e}", path=path) from e
        # posix keeps exactly two leading slashes
        if self._paths is posixpath and resolved.startswith("//") and not resolved.startswith("///"):
            resolved = resolved[1:]
        return resolved

    def rebuild(self, path):
        """
        Point the selector at `path` and re-read its listing.

        Nothing is published unless the path resolves, so a failure leaves the
        previous directory and listing in place.
        """
        self._ensure_open()
        directory = self.resolve(path)

        listing = []
        if directory != self.fs_reader.root():
            listing.append(PARENT_ENTRY)
        listing.extend(self.fs_reader.read_dir(directory) or [])

        self.current_directory = directory
        self.listing = listing
        self.selected_index = -1
        logger.debug(f"Listing {directory}: {len(listing)} entries")

    def activate_index(self, index):
        """
        Record that the entry at `index` was picked.

        Returns `(is_directory, resolved_path)`. When the entry is a directory
        the selector has already moved into it, so the caller should reset
        whatever highlight it keeps for the list.
        """
        self._ensure_open()
        if isinstance(index, bool) or not isinstance(index, int):
            raise IndexOutOfRange(index, len(self.listing))
        if not 0 <= index < len(self.listing):
            raise IndexOutOfRange(index, len(self.listing))

        selection = self.listing[index]
        resolved = self._paths.normpath(self._paths.join(self.current_directory, selection))

        if self.fs_reader.is_dir(resolved):
            self.rebuild(resolved)
            self.selection = selection
            logger.debug(f"Entered {resolved}")
            return True, resolved

        self.selection = selection
        self.selected_index = index
        logger.debug(f"Selected {selection!r} in {self.current_directory}")
        return False, resolved

    def choose(self):
        """Confirm the current selection. Called on the choose button press."""
        self._ensure_open()
        directory, selection = self.current_directory, self.selection
        self.closed = True
        logger.debug(f"Chose {selection!r} in {directory}")
        if self.on_choose_pressed is not None:
            self.on_choose_pressed(directory, selection)
        return directory, selection

    def close(self):
        """Dismiss without choosing. Called on the close button press."""
        self._ensure_open()
        self.closed = True
        logger.debug("Selector closed")
        if self.on_close_pressed is not None:
            self.on_close_pressed()

    def snapshot(self):
        """Everything a rendering surface needs for one frame, JSON safe."""
        return {
            "label": self.label(),
            "purpose": self.purpose.value,
            "directory": self.current_directory,
            "listing": list(self.listing),
            "selection": self.selection,
            "selected_index": self.selected_index,
            "choose_text": self.choose_text(),
            "close_text": self.close_text(),
            "closed": self.closed,
        }
