import logging
import threading

from .exceptions import DependencyError, FileSelectorError

logger = logging.getLogger("FileSelector.Window")


class SelectorApi:
    """
    Exposes a FileSelector to a webview frontend as a pywebview `js_api`.
    Every method returns a JSON-safe dict so the frontend can redraw from it.
    """

    def __init__(self, selector, on_finished=None):
        self._selector = selector
        self._on_finished = on_finished
        # pywebview calls js_api methods from worker threads
        self._lock = threading.RLock()

    def state(self):
        with self._lock:
            return self._selector.snapshot()

    def activate(self, index):
        with self._lock:
            try:
                is_dir, path = self._selector.activate_index(int(index))
            except (FileSelectorError, TypeError, ValueError) as e:
                logger.error(f"Activation of {index!r} failed: {e}")
                return {"error": str(e), "state": self._selector.snapshot()}
            return {"is_directory": is_dir, "path": path, "state": self._selector.snapshot()}

    def choose(self):
        with self._lock:
            try:
                directory, selection = self._selector.choose()
            except FileSelectorError as e:
                logger.error(f"Choose failed: {e}")
                return {"error": str(e), "state": self._selector.snapshot()}
            self._finish()
            return {"directory": directory, "selection": selection}

    def close(self):
        with self._lock:
            try:
                self._selector.close()
            except FileSelectorError as e:
                logger.error(f"Close failed: {e}")
                return {"error": str(e), "state": self._selector.snapshot()}
            self._finish()
            return {"closed": True}

    def _finish(self):
        if self._on_finished is not None:
            self._on_finished()


def show(selector, url=None, html=None, title=None, width=640, height=480, debug=False):
    """
    Open a pywebview window driven by `selector` and block until it closes.
    The page at `url` (or the `html` string) is expected to call the
    `pywebview.api` methods of SelectorApi.
    """
    try:
        import webview
    except ImportError as e:
        raise DependencyError("pywebview is required to show a selector window") from e

    holder = {}

    def destroy():
        window = holder.get("window")
        if window is not None:
            window.destroy()

    api = SelectorApi(selector, on_finished=destroy)
    window = webview.create_window(
        title or selector.label(),
        url=url,
        html=html,
        js_api=api,
        width=width,
        height=height,
    )
    holder["window"] = window
    logger.debug(f"Showing selector window for {selector.current_directory}")
    webview.start(debug=debug)
    return api
