from contextlib import nullcontext
from threading import RLock
from typing import Any, ContextManager


def get_lock(thread_safe: bool = True) -> ContextManager[Any]:
    return RLock() if thread_safe else nullcontext()
