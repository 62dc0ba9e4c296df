# threadsafety_registry/catalog.py
"""
Fixed catalog of types known to be thread-safe.

Things should only be added here when annotating the type itself is not
feasible: it lives in the standard library or in a third-party package.
Everything else should carry its own annotation.

Entries are either a class (the container-of names are checked against
the class's declared type parameters when the registry is built) or a
qualified name.  Named entries are used for types that declare no type
parameters at runtime (most generic standard-library classes are only
subscriptable through ``__class_getitem__``) and for optional packages
that may not be installed.  For those, ``declared`` records the type
parameters the type's stub declares; the test suite checks the
container-of names against it.

Order matters: a later entry for the same name overrides an earlier one.
"""

from __future__ import annotations

import concurrent.futures
import logging
import random
import sched
import threading
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from threadsafety_registry.builder import ThreadSafeTypesBuilder


@dataclass(frozen=True)
class CatalogEntry:
    target: Union[type, str]
    container_of: Tuple[str, ...] = ()
    declared: Optional[Tuple[str, ...]] = None

    @property
    def is_reflectable(self) -> bool:
        return not isinstance(self.target, str)


def _cls(target: type, *container_of: str) -> CatalogEntry:
    return CatalogEntry(target, tuple(container_of))


def _name(target: str, *container_of: str,
          declared: Optional[Tuple[str, ...]] = None) -> CatalogEntry:
    return CatalogEntry(target, tuple(container_of), declared)


_T = ("_T",)

CATALOG: Tuple[CatalogEntry, ...] = (
    # ── threads and random sources ──────────────────────────────────
    _cls(threading.Thread),
    _cls(threading.Timer),
    _cls(random.Random),
    _cls(random.SystemRandom),
    # ── locks and synchronizers ─────────────────────────────────────
    _name("threading.Lock"),
    _name("threading.RLock"),
    _name("threading._RLock"),
    _name("_thread.lock"),
    _name("_thread.RLock"),
    _cls(threading.Semaphore),
    _cls(threading.BoundedSemaphore),
    _cls(threading.Event),
    _cls(threading.Condition),
    _cls(threading.Barrier),
    _name("multiprocessing.synchronize.Lock"),
    _name("multiprocessing.synchronize.RLock"),
    _name("multiprocessing.synchronize.Semaphore"),
    _name("multiprocessing.synchronize.BoundedSemaphore"),
    _name("multiprocessing.synchronize.Condition"),
    _name("multiprocessing.synchronize.Event"),
    _name("multiprocessing.synchronize.Barrier"),
    # ── queues ──────────────────────────────────────────────────────
    _name("queue.Queue", "_T", declared=_T),
    _name("queue.LifoQueue", "_T", declared=_T),
    _name("queue.PriorityQueue", "_T", declared=_T),
    _name("queue.SimpleQueue", "_T", declared=_T),
    _name("multiprocessing.queues.Queue", "_T", declared=_T),
    _name("multiprocessing.queues.JoinableQueue", "_T", declared=_T),
    _name("multiprocessing.queues.SimpleQueue", "_T", declared=_T),
    # ── executors and futures ───────────────────────────────────────
    _cls(concurrent.futures.Executor),
    _cls(concurrent.futures.ThreadPoolExecutor),
    _cls(concurrent.futures.ProcessPoolExecutor),
    _name("concurrent.futures._base.Future", "_T", declared=_T),
    _cls(sched.scheduler),
    # ── context and logging ─────────────────────────────────────────
    _name("contextvars.ContextVar", "_T", declared=_T),
    _name("contextvars.Context"),
    _name("threading.local"),
    _name("_thread._local"),
    _cls(logging.Logger),
    # Exceptions can be mutated (__cause__, with_traceback) but are
    # routinely handed between threads.
    _cls(BaseException),
    # ── third-party packages ────────────────────────────────────────
    _name("janus.Queue", "T", declared=("T",)),
    _name("reactivex.observable.observable.Observable", "_T_out",
          declared=("_T_out",)),
    _name("reactivex.subject.subject.Subject", "_T", declared=_T),
    _name("reactivex.scheduler.threadpoolscheduler.ThreadPoolScheduler"),
    _name("reactivex.scheduler.eventloopscheduler.EventLoopScheduler"),
    _name("diskcache.core.Cache"),
    _name("diskcache.fanout.FanoutCache"),
    _name("urllib3.poolmanager.PoolManager"),
    _name("redis.connection.ConnectionPool"),
    _name("sqlalchemy.engine.base.Engine"),
    _name("pymongo.mongo_client.MongoClient"),
)


def register_catalog(builder: ThreadSafeTypesBuilder) -> ThreadSafeTypesBuilder:
    """Feed every catalog entry through *builder*, in catalog order."""
    for entry in CATALOG:
        if entry.is_reflectable:
            builder.add_class(entry.target, *entry.container_of)
        else:
            builder.add_name(entry.target, *entry.container_of)
    return builder


__all__ = ["CATALOG", "CatalogEntry", "register_catalog"]
