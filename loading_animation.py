# loading_animation.py - spinner shown on one terminal line while a blocking call runs
import sys
import threading

FRAMES = ("|", "/", "-", "\\")


class LoadingAnimation:
    """
    Background spinner.

        spinner = LoadingAnimation().start()
        try:
            slow_call()
        finally:
            spinner.stop()

    stop() returns only once the render thread has exited and the line has been
    blanked, so whatever is printed next is never mixed with spinner frames.
    """

    def __init__(self, stream=None, message: str = "Loading data...", interval: float = 0.1):
        self.stream = stream
        self.message = message
        self.interval = interval
        self._stop = threading.Event()
        self._thread = None

    @property
    def running(self) -> bool:
        return self._thread is not None

    def _out(self):
        return self.stream if self.stream is not None else sys.stdout

    def _render(self):
        out = self._out()
        i = 0
        while not self._stop.is_set():
            out.write(f"\r{self.message} {FRAMES[i]}")
            out.flush()
            i = (i + 1) % len(FRAMES)
            self._stop.wait(self.interval)

    def start(self) -> "LoadingAnimation":
        if self._thread is not None:
            raise RuntimeError("loading animation already running")
        self._stop.clear()
        self._thread = threading.Thread(target=self._render, name="wikr-loading", daemon=True)
        self._thread.start()
        return self

    def stop(self) -> None:
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        out = self._out()
        out.write("\r" + " " * (len(self.message) + 2) + "\r")
        out.flush()

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False
