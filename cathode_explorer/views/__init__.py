from .distribution_view import DistributionView
from .scatter_view import ScatterView
from .type_comparison_view import TypeComparisonView
from .type_distribution_view import TypeDistributionView

__all__ = ["DistributionView", "ScatterView", "TypeComparisonView", "TypeDistributionView"]
