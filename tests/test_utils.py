"""
utils / config / logging_config 模块单元测试
"""

import logging

import numpy as np
import pytest

from stroke_spline.config import LEGACY_TANGENT_WEIGHTS, SplineSettings
from stroke_spline.logging_config import close_handlers, setup_logging
from stroke_spline.utils.geometry import as_points, as_vector, distance


class TestGeometry:
    """几何工具函数测试"""

    def test_as_vector(self):
        """测试转换为 float64 向量"""
        v = as_vector([1, 2, 3])
        assert v.dtype == np.float64
        np.testing.assert_array_equal(v, [1.0, 2.0, 3.0])

    def test_as_vector_copies(self):
        """测试返回副本"""
        src = np.array([1.0, 2.0, 3.0])
        v = as_vector(src)
        v[0] = 10.0
        assert src[0] == 1.0

    @pytest.mark.parametrize("bad", [[1, 2], [1, 2, 3, 4], [[1, 2, 3]], [np.inf, 0, 0], [np.nan, 0, 0]])
    def test_as_vector_invalid(self, bad):
        """测试非法向量"""
        with pytest.raises(ValueError):
            as_vector(bad)

    def test_as_vector_dim(self):
        """测试自定义维数"""
        assert as_vector([1, 2], dim=2).shape == (2,)

    def test_as_points(self):
        """测试点集转换"""
        assert as_points([]).shape == (0, 3)
        assert as_points([[0, 0, 0], [1, 1, 1]]).shape == (2, 3)
        with pytest.raises(ValueError):
            as_points([[0, 0], [1, 1]])

    def test_distance(self):
        """测试欧氏距离"""
        assert distance(np.array([0, 0, 0]), np.array([1, 2, 2])) == 3.0
        assert isinstance(distance(np.zeros(3), np.ones(3)), float)


class TestSplineSettings:
    """参数配置测试"""

    def test_defaults(self):
        """测试默认值"""
        settings = SplineSettings()
        assert settings.tangent_weights == (1 / 3, 2 / 3)
        assert settings.cache_inverse is False
        assert settings.min_spacing == 0.0

    def test_legacy_weights_accepted(self):
        """测试小数近似权重合法"""
        assert SplineSettings(tangent_weights=LEGACY_TANGENT_WEIGHTS).tangent_weights == (0.333, 0.667)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"tangent_weights": (0.5, 0.6)},
            {"tangent_weights": (-0.5, 1.5)},
            {"tangent_weights": (1.0,)},
            {"min_spacing": -1.0},
        ],
    )
    def test_invalid(self, kwargs):
        """测试非法参数"""
        with pytest.raises(ValueError):
            SplineSettings(**kwargs)


class TestLoggingConfig:
    """日志配置测试"""

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        logger = logging.getLogger("stroke_spline")
        level = logger.level
        yield
        close_handlers(logger)
        logger.setLevel(level)

    def test_console_handler(self):
        """测试控制台 handler"""
        logger = setup_logging(logging.DEBUG)
        assert logger.name == "stroke_spline"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeated_setup_no_duplicates(self):
        """测试重复配置不重复添加 handler"""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        """测试写入日志文件"""
        log_file = tmp_path / "spline.log"
        logger = setup_logging(logging.INFO, str(log_file))
        logger.info("curve ready")
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "Logging initialized at level INFO." in content
        assert "curve ready" in content

    def test_reconfigure_closes_file_handler(self, tmp_path):
        """测试重新配置时关闭旧的文件 handler"""
        logger = setup_logging(logging.INFO, str(tmp_path / "first.log"))
        old_file_handler = next(h for h in logger.handlers if isinstance(h, logging.FileHandler))
        stream = old_file_handler.stream
        assert not stream.closed

        setup_logging()
        assert old_file_handler not in logger.handlers
        assert stream.closed


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
