# gps_lab/core/frontiers.py
# One double-ended open list for every strategy: pushing to the back gives FIFO,
# pushing to the front gives LIFO, the engine always pops from the front.
# Each node is queued beside an optional sort key, computed once by the caller.
from __future__ import annotations
from bisect import bisect_right
from collections import deque
from typing import Iterator, Optional

from .node import SearchNode


class Frontier:
    def __init__(self):
        self.q = deque()
        self.keys = deque()  # parallel to q

    def push_back(self, x: SearchNode, key: Optional[int] = None):
        self.q.append(x)
        self.keys.append(key)

    def push_front(self, x: SearchNode, key: Optional[int] = None):
        self.q.appendleft(x)
        self.keys.appendleft(key)

    def pop_front(self) -> SearchNode:
        self.keys.popleft()
        return self.q.popleft()

    def pop_back(self) -> SearchNode:
        self.keys.pop()
        return self.q.pop()

    def clear(self):
        self.q.clear()
        self.keys.clear()

    def peek(self) -> SearchNode: return self.q[0]
    def __len__(self): return len(self.q)
    def __bool__(self): return bool(self.q)
    def __iter__(self) -> Iterator[SearchNode]: return iter(self.q)

    def insert_ordered(self, x: SearchNode, key: int) -> None:
        """
        Insert x after every queued node whose key is <= key.
        Every queued node must carry a key; equal keys stay first-in first-out.
        """
        i = bisect_right(self.keys, key)
        self.q.insert(i, x)
        self.keys.insert(i, key)
