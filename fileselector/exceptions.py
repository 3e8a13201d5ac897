class FileSelectorError(Exception):
    """Base class for all file selector exceptions."""

    def __init__(self, message, code=None):
        super().__init__(message)
        self.code = code


class PathResolutionError(FileSelectorError, ValueError):
    """Raised when a path cannot be normalized to an absolute form."""

    def __init__(self, message, path=None, code=None):
        super().__init__(message, code)
        self.path = path


class IndexOutOfRange(FileSelectorError, IndexError):
    """Raised when an activation index is outside the current listing."""

    def __init__(self, index, size, code=None):
        super().__init__(f"Index {index} out of range for listing of {size} entries", code)
        self.index = index
        self.size = size


class SelectorClosedError(FileSelectorError):
    """Raised when a dismissed selector is driven again."""

    pass


class ConfigError(FileSelectorError):
    """Raised when there is an error loading or parsing label settings."""

    pass


class DependencyError(FileSelectorError):
    """Raised when a required dependency is missing."""

    pass
