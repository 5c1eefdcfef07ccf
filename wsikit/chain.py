"""Chains of extension structures linked through ``p_next``."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterator
from typing import Optional, TypeVar

S = TypeVar("S", bound="ChainedStruct")


@dataclasses.dataclass(kw_only=True)
class ChainedStruct:
    """A structure that names its type and links to the next structure.

    Subclass it as a dataclass to add the fields of a particular structure.
    """

    s_type: int
    p_next: Optional[ChainedStruct] = None

    def _walk(self) -> Iterator[ChainedStruct]:
        entry: Optional[ChainedStruct] = self
        while entry is not None:
            yield entry
            entry = entry.p_next


def find_extension(s_type: int, chain: Optional[ChainedStruct]) -> Optional[ChainedStruct]:
    """Return the first structure in ``chain`` whose type is ``s_type``.

    The search starts at ``chain`` itself. None is returned when no
    structure matches or the chain is empty.
    """
    if chain is None:
        return None
    return next((entry for entry in chain._walk() if entry.s_type == s_type), None)


def shallow_copy_extension(structure: S) -> S:
    """Return a copy of ``structure`` detached from the rest of its chain."""
    return dataclasses.replace(structure, p_next=None)