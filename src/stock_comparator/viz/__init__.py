"""Chart builders."""

from .price_charts import make_comparison_chart, make_price_area_chart

__all__ = ["make_comparison_chart", "make_price_area_chart"]
