"""Exceptions raised by Tumult PRNG."""

# SPDX-License-Identifier: Apache-2.0
# Copyright Tumult Labs 2023


class InvalidArgumentError(ValueError):
    """Raised when a caller-supplied argument violates a precondition.

    The generator is never advanced before this error is raised, so the seed
    of the instance that raised it is left unmodified.
    """


class CrossThreadAccessError(RuntimeError):
    """Raised when an ambient instance is advanced from a thread it doesn't belong to.

    Only raised when :meth:`~tmlt.prng.utils.configuration.Config.check_thread_affinity`
    is enabled.
    """

    def __init__(self, owner: int, caller: int):
        """Constructor.

        Args:
            owner: Identifier of the thread that owns the instance.
            caller: Identifier of the thread that attempted to use it.
        """
        super().__init__(
            f"Ambient generator owned by thread {owner} was used from thread "
            f"{caller}. Call system_random() from each thread instead of sharing "
            "the returned instance."
        )
        self.owner = owner
        self.caller = caller
