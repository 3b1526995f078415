"""API route package — imports all routers for main.py."""

from edu_insights.api.health import router as health_router  # noqa: F401
from edu_insights.api.stats import router as stats_router  # noqa: F401
from edu_insights.api.subjects import router as subjects_router  # noqa: F401
from edu_insights.api.careers import router as careers_router  # noqa: F401
