"""Mix selection."""

from vamos.mix.selection import NoMixAvailable, get_random_mix, select_random_mix

__all__ = ["NoMixAvailable", "get_random_mix", "select_random_mix"]
