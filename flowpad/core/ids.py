import itertools


class IdGenerator:
    """
    Session-scoped id source: a stable prefix plus a monotonically
    increasing counter. Each GraphStore owns its own instances, so two
    editors never share a counter.
    """

    def __init__(self, prefix: str = "node_", start: int = 0):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def next(self) -> str:
        return f"{self.prefix}{next(self._counter)}"

    __next__ = next

    def __iter__(self):
        return self
