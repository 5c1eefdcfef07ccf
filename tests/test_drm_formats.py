import pytest

from wsikit.drm_formats import (
    DRM_FORMAT_ABGR8888,
    DRM_FORMAT_ARGB8888,
    DRM_FORMAT_BIG_ENDIAN,
    DRM_FORMAT_RGB332,
    DRM_FORMAT_RGB565,
    DRM_FORMAT_XRGB8888,
    FOURCC_FORMAT_TABLE,
    SRGB_FOURCC_FORMAT_TABLE,
    FormatSpec,
    VkFormat,
    drm_fourcc_format_get_num_planes,
    drm_to_vk_format,
    drm_to_vk_srgb_format,
    find_format_spec,
    fourcc_code,
    vk_to_drm_format,
)


def test_fourcc_code_packs_little_endian():
    assert fourcc_code("X", "R", "2", "4") == 0x34325258
    assert fourcc_code("X", "R", "2", "4") == DRM_FORMAT_XRGB8888


def test_fourcc_code_accepts_ints():
    assert fourcc_code(ord("A"), ord("R"), ord("2"), ord("4")) == DRM_FORMAT_ARGB8888


@pytest.mark.parametrize("bad", ["AB", 256, -1])
def test_fourcc_code_rejects_bad_parts(bad):
    with pytest.raises(ValueError):
        fourcc_code(bad, "R", "2", "4")


def test_table_sizes():
    found = [find_format_spec(spec.drm_format) for spec in FOURCC_FORMAT_TABLE]
    assert len(found) == 30
    assert found == list(FOURCC_FORMAT_TABLE)
    srgb = [vk_to_drm_format(spec.vk_format) for spec in SRGB_FOURCC_FORMAT_TABLE]
    assert srgb == [DRM_FORMAT_ARGB8888, DRM_FORMAT_ABGR8888]


def test_known_mappings():
    assert drm_to_vk_format(DRM_FORMAT_ARGB8888) == VkFormat.B8G8R8A8_UNORM
    assert drm_to_vk_format(DRM_FORMAT_ABGR8888) == VkFormat.R8G8B8A8_UNORM
    assert drm_to_vk_srgb_format(DRM_FORMAT_ARGB8888) == VkFormat.B8G8R8A8_SRGB
    assert drm_to_vk_srgb_format(DRM_FORMAT_ABGR8888) == VkFormat.R8G8B8A8_SRGB


def test_round_trip_for_defined_formats():
    for spec in FOURCC_FORMAT_TABLE:
        if spec.vk_format == VkFormat.UNDEFINED:
            continue
        assert drm_to_vk_format(vk_to_drm_format(spec.vk_format)) == spec.vk_format


def test_srgb_round_trip():
    for spec in SRGB_FOURCC_FORMAT_TABLE:
        drm = vk_to_drm_format(spec.vk_format)
        assert drm == spec.drm_format
        assert drm_to_vk_srgb_format(drm) == spec.vk_format


def test_undefined_maps_to_first_table_entry():
    assert vk_to_drm_format(VkFormat.UNDEFINED) == DRM_FORMAT_RGB332


def test_unknown_vk_format_gives_zero():
    assert vk_to_drm_format(123456) == 0


def test_unknown_drm_format_gives_undefined():
    nv12 = fourcc_code("N", "V", "1", "2")
    assert drm_to_vk_format(nv12) == VkFormat.UNDEFINED
    assert drm_to_vk_srgb_format(DRM_FORMAT_RGB565) == VkFormat.UNDEFINED


def test_num_planes():
    for spec in FOURCC_FORMAT_TABLE:
        assert drm_fourcc_format_get_num_planes(spec.drm_format) == 1
    assert drm_fourcc_format_get_num_planes(fourcc_code("N", "V", "1", "2")) == 0


def test_find_format_spec_masks_big_endian():
    spec = find_format_spec(DRM_FORMAT_RGB565 | DRM_FORMAT_BIG_ENDIAN)
    assert spec is not None
    assert spec.drm_format == DRM_FORMAT_RGB565
    assert spec.bpp == (16, 0, 0, 0)
    assert spec.nr_planes == 1


def test_find_format_spec_unknown():
    assert find_format_spec(fourcc_code("N", "V", "1", "2")) is None


def test_bpp_is_multiple_of_eight():
    for entry in FOURCC_FORMAT_TABLE:
        spec = find_format_spec(entry.drm_format)
        assert spec.bpp[0] % 8 == 0
        assert spec.bpp[1:] == (0, 0, 0)


def test_format_spec_validates_bpp_length():
    with pytest.raises(ValueError):
        FormatSpec(DRM_FORMAT_RGB565, 1, (16,), VkFormat.UNDEFINED)