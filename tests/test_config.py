"""Tests for configuration dataclasses."""

import json

import pytest

from spatialstatpy.config import Alternative, FDRMethod, InferenceConfig


class TestInferenceConfig:
    """Tests for InferenceConfig."""

    def test_defaults(self):
        """Test default values."""
        config = InferenceConfig()
        assert config.alpha == 0.05
        assert config.fdr_method is FDRMethod.BH
        assert config.alternative is Alternative.TWO_SIDED
        assert config.use_gpu is False

    def test_string_enums(self):
        """Test plain strings are coerced to enum members."""
        config = InferenceConfig(fdr_method="by", alternative="less")
        assert config.fdr_method is FDRMethod.BY
        assert config.alternative is Alternative.LESS

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"alpha": 0.0},
            {"alpha": 1.5},
            {"n_permutations": 0},
            {"fdr_method": "holm"},
            {"alternative": "sideways"},
        ],
    )
    def test_invalid(self, kwargs):
        """Test invalid values raise ValueError."""
        with pytest.raises(ValueError):
            InferenceConfig(**kwargs)

    def test_to_dict(self):
        """Test enum values serialize to strings."""
        d = InferenceConfig(fdr_method="bonferroni", random_seed=3).to_dict()
        assert d["fdr_method"] == "bonferroni"
        assert d["alternative"] == "two-sided"
        assert d["random_seed"] == 3
        json.dumps(d)

    def test_save_load(self, tmp_path):
        """Test JSON round trip."""
        path = tmp_path / "inference.json"
        config = InferenceConfig(alpha=0.01, alternative="greater", n_permutations=499)
        config.save(str(path))

        loaded = InferenceConfig.load(str(path))
        assert loaded == config
