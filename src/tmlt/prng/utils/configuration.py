"""Configuration properties for Tumult PRNG."""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023

import os

_TRUTHY = ("1", "true", "yes", "on")


class Config:
    """Global configuration for programs using Tumult PRNG."""

    _check_thread_affinity = (
        os.environ.get("TMLT_PRNG_CHECK_THREADS", "").strip().lower() in _TRUTHY
    )

    @classmethod
    def check_thread_affinity(cls) -> bool:
        """Whether ambient generators refuse to be advanced from other threads.

        Defaults to the value of the ``TMLT_PRNG_CHECK_THREADS`` environment
        variable. Only affects instances created after the setting changes.
        """
        return cls._check_thread_affinity

    @classmethod
    def set_check_thread_affinity(cls, enabled: bool) -> None:
        """Enable or disable the cross-thread check for new ambient generators."""
        cls._check_thread_affinity = bool(enabled)
