"""Tests für die Regionsauswahl."""

import numpy as np
import pytest

from frame_accent.analysis.options import ExtractionOptions
from frame_accent.analysis.region_sampler import Region, RegionKind, select_regions

PORTRAIT = 9 / 16
PANORAMA = 3.0
LANDSCAPE = 16 / 9


def _only(regions) -> Region:
    assert len(regions) == 1
    return regions[0]


class TestSelectRegions:
    def test_portrait_video_uses_center_crop(self):
        region = _only(select_regions(PORTRAIT, True, ExtractionOptions()))
        assert region.kind is RegionKind.PORTRAIT_CENTER
        assert region.as_tuple() == (10, 5, 30, 40)

    def test_portrait_image_is_not_center_cropped(self):
        region = _only(select_regions(PORTRAIT, False, ExtractionOptions()))
        assert region.kind is RegionKind.LOWER_THIRD

    def test_portrait_flag_disabled_falls_through(self):
        options = ExtractionOptions(analyze_portrait_video=False)
        region = _only(select_regions(PORTRAIT, True, options))
        assert region.kind is RegionKind.LOWER_THIRD

    def test_split_view_for_wide_sources(self):
        left, right = select_regions(PANORAMA, False, ExtractionOptions())
        assert left.kind is RegionKind.SPLIT_LEFT
        assert right.kind is RegionKind.SPLIT_RIGHT
        assert left.as_tuple() == (0, 33, 25, 17)
        assert right.as_tuple() == (25, 33, 25, 17)

    def test_split_view_applies_to_wide_video_too(self):
        regions = select_regions(PANORAMA, True, ExtractionOptions())
        assert [r.kind for r in regions] == [RegionKind.SPLIT_LEFT, RegionKind.SPLIT_RIGHT]

    def test_aspect_exactly_threshold_is_not_split(self):
        region = _only(select_regions(2.5, False, ExtractionOptions()))
        assert region.kind is RegionKind.LOWER_THIRD

    def test_split_disabled(self):
        region = _only(select_regions(PANORAMA, False, ExtractionOptions(handle_split_view=False)))
        assert region.kind is RegionKind.LOWER_THIRD

    def test_lower_third_band(self):
        region = _only(select_regions(LANDSCAPE, False, ExtractionOptions()))
        assert region.as_tuple() == (0, 33, 50, 17)

    def test_full_frame_when_all_heuristics_off(self):
        options = ExtractionOptions(
            sample_lower_third=False, handle_split_view=False, analyze_portrait_video=False
        )
        region = _only(select_regions(PANORAMA, True, options))
        assert region.kind is RegionKind.FULL
        assert region.as_tuple() == (0, 0, 50, 50)

    @pytest.mark.parametrize("size", [10, 37, 64, 100])
    def test_regions_stay_inside_canvas(self, size):
        options = ExtractionOptions(sample_size=size)
        for aspect, is_video in [(PORTRAIT, True), (PANORAMA, False), (LANDSCAPE, False)]:
            for region in select_regions(aspect, is_video, options):
                assert region.offset_x >= 0 and region.offset_y >= 0
                assert region.offset_x + region.width <= size
                assert region.offset_y + region.height <= size
                assert not region.is_empty


class TestRegion:
    def test_crop_shape_and_content(self):
        canvas = np.arange(10 * 10 * 4, dtype=np.uint32).reshape(10, 10, 4)
        region = Region(2, 3, 4, 5)
        cropped = region.crop(canvas)
        assert cropped.shape == (5, 4, 4)
        assert (cropped[0, 0] == canvas[3, 2]).all()

    def test_empty(self):
        assert Region(0, 0, 0, 5).is_empty
        assert not Region(0, 0, 1, 1).is_empty
