"""Personal net worth projection engine and its HTTP API."""

from networth.core.net_income import compute_net_salary
from networth.core.projection import project, project_accumulation, project_retirement
from networth.schemas.projection import ProjectionParameters, YearlyRecord

__all__ = [
    "ProjectionParameters",
    "YearlyRecord",
    "compute_net_salary",
    "project",
    "project_accumulation",
    "project_retirement",
]
