from .report_models import (  # noqa: F401
    AnalysisReport,
    Channel,
    MarketStats,
    Strategy,
    is_high_competition,
)
from .topic_insights import (  # noqa: F401
    REGIONS,
    AnalysisError,
    analyze_topic,
    refresh_niche_strategy,
)

__all__ = [
    "AnalysisReport",
    "Channel",
    "MarketStats",
    "Strategy",
    "is_high_competition",
    "REGIONS",
    "AnalysisError",
    "analyze_topic",
    "refresh_niche_strategy",
]
