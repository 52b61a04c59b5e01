"""Per-thread generators that don't need to be constructed explicitly."""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023

import logging
import threading

from tmlt.prng.generator import Random
from tmlt.prng.utils.configuration import Config

_logger = logging.getLogger(__name__)

_registry = threading.local()


def system_random() -> Random:
    """Getter for the calling thread's generator.

    The first call on each thread creates a randomly seeded :class:`Random`,
    and later calls on that thread return the same instance. Threads never see
    each other's instances, so no locking is needed. Don't keep the returned
    object around and use it from another thread; call this function there
    instead. Setting :meth:`~tmlt.prng.utils.configuration.Config.set_check_thread_affinity`
    turns such misuse into a :class:`~tmlt.prng.exceptions.CrossThreadAccessError`.
    """
    try:
        return _registry.instance
    except AttributeError:
        pass
    rng = Random()
    owner = threading.get_ident()
    if Config.check_thread_affinity():
        rng._bind_to_thread(owner)  # pylint: disable=protected-access
    _registry.instance = rng
    _logger.debug("Created ambient generator for thread %d", owner)
    return rng
