"""A pool of numbered resources handed out to competing threads."""

from __future__ import annotations

import threading


class ResourceManager:
    """Hands out resource ids ``0..num-1``, blocking while none is free."""

    def __init__(self, num: int):
        if num <= 0:
            raise ValueError("need at least one resource")
        self.resource_num = num
        self._condition = threading.Condition()
        self._avail_num = num
        self._free = [True] * num

    @property
    def available(self) -> int:
        """How many resources are currently free."""
        with self._condition:
            return self._avail_num

    def get_resource(self, start_id: int = 0) -> int:
        """Take the first free resource at or after ``start_id``, cycling round."""
        with self._condition:
            self._condition.wait_for(lambda: self._avail_num > 0)
            self._avail_num -= 1
            rem = start_id % self.resource_num
            while not self._free[rem]:
                rem = (rem + 1) % self.resource_num
            self._free[rem] = False
            return rem

    def release_resource(self, res: int) -> None:
        """Return a resource to the pool and wake waiting threads."""
        with self._condition:
            self._free[res] = True
            self._avail_num += 1
            self._condition.notify_all()