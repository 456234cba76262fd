"""
Unit tests for components.charts.
"""

from components.charts import create_analytics_bar_chart, create_device_status_chart


class TestDeviceStatusChart:
    """Test cases for the status bar chart."""

    def test_bars_follow_count_order(self):
        fig = create_device_status_chart({"Đang sử dụng": 3, "Bảo trì": 1, "Sửa chữa": 1})
        bar = fig.data[0]
        assert list(bar.x) == ["Đang sử dụng", "Bảo trì", "Sửa chữa"]
        assert list(bar.y) == [3, 1, 1]

    def test_share_of_total(self):
        fig = create_analytics_bar_chart(["a", "b"], [1, 3], "x", "y")
        assert list(fig.data[0].customdata) == [25.0, 75.0]

    def test_empty_data_has_no_division_error(self):
        fig = create_analytics_bar_chart([], [], "x", "y")
        assert len(fig.data[0].x or ()) == 0
