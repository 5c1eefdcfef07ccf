"""Window-system buffer allocation: format selection and heap allocation."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Sequence
from typing import Optional, Protocol

from wsikit.drm_formats import (
    DRM_FORMAT_MOD_LINEAR,
    MAX_PLANES,
    FormatSpec,
    find_format_spec,
)

INTERFACE_VERSION = 3
MIN_ALIGN_SIZE = 64
MAX_IMAGE_SIZE = 128000
_SIZE_MAX = 2**64 - 1


class WsiallocError(Exception):
    """An allocation request failed; ``code`` tells why."""

    INVALID = -1
    NOT_SUPPORTED = -2
    NO_RESOURCE = -3

    _NAMES = {INVALID: "invalid parameters", NOT_SUPPORTED: "not supported", NO_RESOURCE: "no resource"}

    def __init__(self, code: int, detail: str = "") -> None:
        self.code = code
        text = self._NAMES.get(code, f"error {code}")
        super().__init__(f"{text}: {detail}" if detail else text)


class FormatFlag(enum.IntFlag):
    """Properties of a requested format."""

    NON_DISJOINT = 0x1


class AllocateFlag(enum.IntFlag):
    """Options for an allocation request."""

    PROTECTED = 0x1
    NO_MEMORY = 0x2
    HIGHEST_FIXED_RATE_COMPRESSION = 0x4


@dataclasses.dataclass(frozen=True)
class WsiallocFormat:
    """A fourcc format with the modifier applied to all of its planes."""

    fourcc: int
    modifier: int = DRM_FORMAT_MOD_LINEAR
    flags: FormatFlag = FormatFlag(0)


@dataclasses.dataclass(frozen=True)
class AllocateInfo:
    """A request: candidate formats in order of preference and a size."""

    formats: Sequence[WsiallocFormat]
    width: int
    height: int
    flags: AllocateFlag = AllocateFlag(0)


@dataclasses.dataclass(frozen=True)
class AllocateResult:
    """The chosen format and the per-plane layout of the buffer."""

    format: WsiallocFormat
    average_row_strides: tuple[int, ...]
    offsets: tuple[int, ...]
    buffer_fds: tuple[int, ...]
    is_disjoint: bool = False


class HeapBackend(Protocol):
    """A memory heap device that hands out buffers as file descriptors."""

    def allocate(self, size: int, heap_id: int) -> int:
        """Allocate ``size`` bytes from heap ``heap_id`` and return its descriptor.

        A negative return value or an OSError means the allocation failed.
        """
        ...


def round_size_up_to_align(size: int) -> int:
    """Round ``size`` up to the next multiple of the minimum alignment."""
    return (size + MIN_ALIGN_SIZE - 1) & ~(MIN_ALIGN_SIZE - 1)


def calculate_format_properties(
    fmt: WsiallocFormat, spec: FormatSpec, width: int, height: int
) -> tuple[tuple[int, ...], tuple[int, ...]]:
    """Return the per-plane row strides and offsets for a linear layout.

    Raises WsiallocError(NOT_SUPPORTED) for non-linear modifiers and for
    formats with more than one plane.
    """
    if fmt.modifier != DRM_FORMAT_MOD_LINEAR:
        raise WsiallocError(WsiallocError.NOT_SUPPORTED, f"modifier {fmt.modifier:#x}")
    if spec.nr_planes > 1:
        raise WsiallocError(WsiallocError.NOT_SUPPORTED, "multi-plane format")

    strides: list[int] = []
    offsets: list[int] = []
    size = 0
    for bits in spec.bpp[: spec.nr_planes]:
        if bits % 8:
            raise ValueError(f"bits per pixel must be a multiple of 8, got {bits}")
        stride = round_size_up_to_align(width * (bits // 8))
        strides.append(stride)
        offsets.append(size)
        size += stride * height
    return tuple(strides), tuple(offsets)


def validate_info(info: AllocateInfo) -> None:
    """Raise WsiallocError(INVALID) if the request cannot be served."""
    if not info.formats:
        raise WsiallocError(WsiallocError.INVALID, "no formats given")
    for name, value in (("width", info.width), ("height", info.height)):
        if not 1 <= value <= MAX_IMAGE_SIZE:
            raise WsiallocError(
                WsiallocError.INVALID, f"{name} {value} outside 1..{MAX_IMAGE_SIZE}"
            )


@dataclasses.dataclass(frozen=True)
class _Selection:
    fmt: WsiallocFormat
    spec: FormatSpec
    strides: tuple[int, ...]
    offsets: tuple[int, ...]


class WsiAllocator:
    """Allocates single-plane linear buffers from a heap backend."""

    def __init__(
        self, backend: HeapBackend, heap_id: int, protected_heap_id: Optional[int] = None
    ) -> None:
        if heap_id < 0:
            raise WsiallocError(WsiallocError.NO_RESOURCE, "no usable heap")
        self._backend = backend
        self._heap_id = heap_id
        self._protected_heap_id = protected_heap_id

    @property
    def protected_heap_exists(self) -> bool:
        return self._protected_heap_id is not None

    def _select(self, info: AllocateInfo) -> _Selection:
        error: Optional[WsiallocError] = None
        for fmt in info.formats:
            spec = find_format_spec(fmt.fourcc)
            if spec is None:
                error = WsiallocError(WsiallocError.NOT_SUPPORTED, f"fourcc {fmt.fourcc:#x}")
                continue
            try:
                strides, offsets = calculate_format_properties(fmt, spec, info.width, info.height)
            except WsiallocError as exc:
                error = exc
                continue
            return _Selection(fmt, spec, strides, offsets)
        assert error is not None
        raise error

    def _allocate_buffer(self, selection: _Selection, info: AllocateInfo) -> int:
        heap_id = self._heap_id
        if info.flags & AllocateFlag.PROTECTED:
            if self._protected_heap_id is None:
                raise WsiallocError(WsiallocError.NO_RESOURCE, "no protected heap")
            heap_id = self._protected_heap_id

        total_size = selection.offsets[0] + selection.strides[0] * info.height
        if total_size > _SIZE_MAX:
            raise WsiallocError(WsiallocError.NO_RESOURCE, "buffer too large")
        try:
            fd = self._backend.allocate(total_size, heap_id)
        except OSError as exc:
            raise WsiallocError(WsiallocError.NO_RESOURCE, str(exc)) from exc
        if fd < 0:
            raise WsiallocError(WsiallocError.NO_RESOURCE, "heap allocation failed")
        return fd

    def allocate(self, info: AllocateInfo) -> AllocateResult:
        """Pick the first usable format of ``info`` and allocate a buffer for it.

        With AllocateFlag.NO_MEMORY only the layout is computed and no
        descriptor is returned. Raises WsiallocError on failure.
        """
        validate_info(info)
        selection = self._select(info)
        fds: tuple[int, ...] = ()
        if not info.flags & AllocateFlag.NO_MEMORY:
            fds = (self._allocate_buffer(selection, info),)
        return AllocateResult(
            format=selection.fmt,
            average_row_strides=selection.strides[:MAX_PLANES],
            offsets=selection.offsets[:MAX_PLANES],
            buffer_fds=fds,
            is_disjoint=False,
        )