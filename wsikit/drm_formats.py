"""Mapping between DRM fourcc pixel formats and Vulkan formats."""

from __future__ import annotations

import dataclasses
import enum

MAX_PLANES = 4

DRM_FORMAT_BIG_ENDIAN = 1 << 31
DRM_FORMAT_MOD_LINEAR = 0


def fourcc_code(a: str | int, b: str | int, c: str | int, d: str | int) -> int:
    """Pack four characters (or byte values) into a little-endian fourcc code."""
    value = 0
    for shift, part in zip((0, 8, 16, 24), (a, b, c, d)):
        if isinstance(part, str):
            if len(part) != 1:
                raise ValueError(f"fourcc part must be a single character: {part!r}")
            part = ord(part)
        if not 0 <= part <= 0xFF:
            raise ValueError(f"fourcc part out of byte range: {part!r}")
        value |= part << shift
    return value


DRM_FORMAT_RGB332 = fourcc_code("R", "G", "B", "8")
DRM_FORMAT_BGR233 = fourcc_code("B", "G", "R", "8")
DRM_FORMAT_XRGB4444 = fourcc_code("X", "R", "1", "2")
DRM_FORMAT_XBGR4444 = fourcc_code("X", "B", "1", "2")
DRM_FORMAT_RGBX4444 = fourcc_code("R", "X", "1", "2")
DRM_FORMAT_BGRX4444 = fourcc_code("B", "X", "1", "2")
DRM_FORMAT_ARGB4444 = fourcc_code("A", "R", "1", "2")
DRM_FORMAT_ABGR4444 = fourcc_code("A", "B", "1", "2")
DRM_FORMAT_RGBA4444 = fourcc_code("R", "A", "1", "2")
DRM_FORMAT_BGRA4444 = fourcc_code("B", "A", "1", "2")
DRM_FORMAT_XRGB1555 = fourcc_code("X", "R", "1", "5")
DRM_FORMAT_XBGR1555 = fourcc_code("X", "B", "1", "5")
DRM_FORMAT_RGBX5551 = fourcc_code("R", "X", "1", "5")
DRM_FORMAT_BGRX5551 = fourcc_code("B", "X", "1", "5")
DRM_FORMAT_ARGB1555 = fourcc_code("A", "R", "1", "5")
DRM_FORMAT_ABGR1555 = fourcc_code("A", "B", "1", "5")
DRM_FORMAT_RGBA5551 = fourcc_code("R", "A", "1", "5")
DRM_FORMAT_BGRA5551 = fourcc_code("B", "A", "1", "5")
DRM_FORMAT_RGB565 = fourcc_code("R", "G", "1", "6")
DRM_FORMAT_BGR565 = fourcc_code("B", "G", "1", "6")
DRM_FORMAT_RGB888 = fourcc_code("R", "G", "2", "4")
DRM_FORMAT_BGR888 = fourcc_code("B", "G", "2", "4")
DRM_FORMAT_XRGB8888 = fourcc_code("X", "R", "2", "4")
DRM_FORMAT_XBGR8888 = fourcc_code("X", "B", "2", "4")
DRM_FORMAT_RGBX8888 = fourcc_code("R", "X", "2", "4")
DRM_FORMAT_BGRX8888 = fourcc_code("B", "X", "2", "4")
DRM_FORMAT_ARGB8888 = fourcc_code("A", "R", "2", "4")
DRM_FORMAT_ABGR8888 = fourcc_code("A", "B", "2", "4")
DRM_FORMAT_RGBA8888 = fourcc_code("R", "A", "2", "4")
DRM_FORMAT_BGRA8888 = fourcc_code("B", "A", "2", "4")


class VkFormat(enum.IntEnum):
    """The Vulkan formats that appear in the fourcc tables."""

    UNDEFINED = 0
    R4G4B4A4_UNORM_PACK16 = 2
    B4G4R4A4_UNORM_PACK16 = 3
    R5G6B5_UNORM_PACK16 = 4
    B5G6R5_UNORM_PACK16 = 5
    R5G5B5A1_UNORM_PACK16 = 6
    B5G5R5A1_UNORM_PACK16 = 7
    A1R5G5B5_UNORM_PACK16 = 8
    R8G8B8_UNORM = 23
    B8G8R8_UNORM = 30
    R8G8B8A8_UNORM = 37
    R8G8B8A8_SRGB = 43
    B8G8R8A8_UNORM = 44
    B8G8R8A8_SRGB = 50


@dataclasses.dataclass(frozen=True)
class FormatSpec:
    """Layout of a fourcc format: plane count and bits per pixel per plane."""

    drm_format: int
    nr_planes: int
    bpp: tuple[int, ...]
    vk_format: VkFormat

    def __post_init__(self) -> None:
        bpp = tuple(self.bpp)
        if len(bpp) != MAX_PLANES:
            raise ValueError(f"bpp must have {MAX_PLANES} entries")
        if not 0 <= self.nr_planes <= MAX_PLANES:
            raise ValueError(f"nr_planes must be between 0 and {MAX_PLANES}")
        object.__setattr__(self, "bpp", bpp)


def _spec(drm_format: int, bits: int, vk_format: VkFormat) -> FormatSpec:
    return FormatSpec(drm_format, 1, (bits, 0, 0, 0), vk_format)


FOURCC_FORMAT_TABLE: tuple[FormatSpec, ...] = (
    _spec(DRM_FORMAT_RGB332, 8, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_BGR233, 8, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_XRGB4444, 16, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_XBGR4444, 16, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_RGBX4444, 16, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_BGRX4444, 16, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_ARGB4444, 16, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_ABGR4444, 16, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_RGBA4444, 16, VkFormat.R4G4B4A4_UNORM_PACK16),
    _spec(DRM_FORMAT_BGRA4444, 16, VkFormat.B4G4R4A4_UNORM_PACK16),
    _spec(DRM_FORMAT_XRGB1555, 16, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_XBGR1555, 16, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_RGBX5551, 16, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_BGRX5551, 16, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_ARGB1555, 16, VkFormat.A1R5G5B5_UNORM_PACK16),
    _spec(DRM_FORMAT_ABGR1555, 16, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_RGBA5551, 16, VkFormat.R5G5B5A1_UNORM_PACK16),
    _spec(DRM_FORMAT_BGRA5551, 16, VkFormat.B5G5R5A1_UNORM_PACK16),
    _spec(DRM_FORMAT_RGB565, 16, VkFormat.R5G6B5_UNORM_PACK16),
    _spec(DRM_FORMAT_BGR565, 16, VkFormat.B5G6R5_UNORM_PACK16),
    _spec(DRM_FORMAT_RGB888, 24, VkFormat.B8G8R8_UNORM),
    _spec(DRM_FORMAT_BGR888, 24, VkFormat.R8G8B8_UNORM),
    _spec(DRM_FORMAT_XRGB8888, 32, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_XBGR8888, 32, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_RGBX8888, 32, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_BGRX8888, 32, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_ARGB8888, 32, VkFormat.B8G8R8A8_UNORM),
    _spec(DRM_FORMAT_ABGR8888, 32, VkFormat.R8G8B8A8_UNORM),
    _spec(DRM_FORMAT_RGBA8888, 32, VkFormat.UNDEFINED),
    _spec(DRM_FORMAT_BGRA8888, 32, VkFormat.UNDEFINED),
)

SRGB_FOURCC_FORMAT_TABLE: tuple[FormatSpec, ...] = (
    _spec(DRM_FORMAT_ARGB8888, 32, VkFormat.B8G8R8A8_SRGB),
    _spec(DRM_FORMAT_ABGR8888, 32, VkFormat.R8G8B8A8_SRGB),
)

_SINGLE_PLANE_FORMATS = frozenset(spec.drm_format for spec in FOURCC_FORMAT_TABLE)


def vk_to_drm_format(vk_format: int) -> int:
    """Return the fourcc for a Vulkan format, or 0 if there is none.

    The linear table is searched before the sRGB one and the first match
    wins, so ``VkFormat.UNDEFINED`` maps to the first undefined entry.
    """
    for spec in (*FOURCC_FORMAT_TABLE, *SRGB_FOURCC_FORMAT_TABLE):
        if spec.vk_format == vk_format:
            return spec.drm_format
    return 0


def drm_to_vk_format(drm_format: int) -> VkFormat:
    """Return the linear Vulkan format for a fourcc, or UNDEFINED."""
    return next(
        (spec.vk_format for spec in FOURCC_FORMAT_TABLE if spec.drm_format == drm_format),
        VkFormat.UNDEFINED,
    )


def drm_to_vk_srgb_format(drm_format: int) -> VkFormat:
    """Return the sRGB Vulkan format for a fourcc, or UNDEFINED."""
    return next(
        (spec.vk_format for spec in SRGB_FOURCC_FORMAT_TABLE if spec.drm_format == drm_format),
        VkFormat.UNDEFINED,
    )


def drm_fourcc_format_get_num_planes(fourcc: int) -> int:
    """Return the number of planes of a fourcc format, or 0 if unknown."""
    return 1 if fourcc in _SINGLE_PLANE_FORMATS else 0


def find_format_spec(fourcc: int) -> FormatSpec | None:
    """Return the table entry for ``fourcc``, ignoring the big-endian bit."""
    masked = fourcc & ~DRM_FORMAT_BIG_ENDIAN & 0xFFFFFFFF
    return next((spec for spec in FOURCC_FORMAT_TABLE if spec.drm_format == masked), None)