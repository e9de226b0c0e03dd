"""End-to-end tests for get_pressure_path."""

from __future__ import annotations

import pytest

from pressurepath.engine import (
    InsufficientPathData,
    InvalidWidthProfile,
    PathSyntaxError,
    SamplerConfig,
    WidthProfile,
    get_pressure_path,
)
from tests.conftest import (
    CONSTANT_PROFILE,
    HORIZONTAL_200_D,
    SHORT_DIAGONAL_D,
    TUTORIAL_PROFILE,
    WAVE_D,
)


class TestPressurePath:
    def test_tutorial_curve(self, wave_d):
        result = get_pressure_path(wave_d, TUTORIAL_PROFILE, 200)
        assert result.outline_curve.isclosed()
        assert result.outline_d.startswith("M")
        assert not result.truncated
        assert len(result.samples) % 2 == 0
        assert result.evaluations >= len(result.samples) // 2

    def test_samples_top_then_mirrored_bottom(self):
        result = get_pressure_path(SHORT_DIAGONAL_D, CONSTANT_PROFILE, 100)
        top, bottom = result.samples[:2], result.samples[2:]
        assert [s.position for s in top] == [0.0, 1.0]
        assert [s.position for s in bottom] == [1.0, 0.0]
        assert bottom[0].offset == (-top[1].offset[0], -top[1].offset[1])

    def test_accepts_profile_object(self):
        profile = WidthProfile.from_pairs(CONSTANT_PROFILE)
        result = get_pressure_path(HORIZONTAL_200_D, profile, 100)
        assert result.outline_curve.isclosed()

    def test_truncation_is_reported(self):
        result = get_pressure_path(WAVE_D, TUTORIAL_PROFILE, 200, config=SamplerConfig(max_evaluations=4))
        assert result.truncated
        assert result.evaluations == 4
        assert result.outline_curve.isclosed()

    def test_straight_line_keeps_only_endpoints(self):
        result = get_pressure_path(HORIZONTAL_200_D, CONSTANT_PROFILE, 100)
        assert [s.position for s in result.samples] == [0.0, 1.0, 1.0, 0.0]
        assert result.evaluations == 2

    def test_zero_tangent_as_direction_adds_samples(self):
        result = get_pressure_path(
            HORIZONTAL_200_D, CONSTANT_PROFILE, 100, config=SamplerConfig(zero_tangent_undefined=False)
        )
        assert len(result.samples) == 10


class TestPressurePathErrors:
    def test_move_only_rejected(self):
        with pytest.raises(InsufficientPathData):
            get_pressure_path("M10,10", CONSTANT_PROFILE, 100)

    def test_empty_path_rejected(self):
        with pytest.raises(InsufficientPathData):
            get_pressure_path("", CONSTANT_PROFILE, 100)

    def test_empty_profile_rejected_before_sampling(self, fake_engine):
        with pytest.raises(InvalidWidthProfile):
            get_pressure_path(HORIZONTAL_200_D, [], 100, engine=fake_engine)
        assert fake_engine.frame_calls == 0

    def test_strict_profile(self):
        with pytest.raises(InvalidWidthProfile):
            get_pressure_path(
                HORIZONTAL_200_D,
                [(1.0, 1.0), (0.0, 1.0)],
                100,
                config=SamplerConfig(strict_profile=True),
            )

    def test_unparseable_path(self):
        with pytest.raises(PathSyntaxError):
            get_pressure_path("M0,0 Q", CONSTANT_PROFILE, 100)

    def test_domain_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            get_pressure_path("M10,10", CONSTANT_PROFILE, 100)
