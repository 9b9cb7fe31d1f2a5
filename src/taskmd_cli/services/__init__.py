"""Services module for taskmd - Business logic layer."""

from .config_service import ConfigService, get_config_service
from .dashboard_service import DashboardService, get_dashboard_service
from .task_service import TaskService, get_task_service

__all__ = [
    "TaskService",
    "DashboardService",
    "ConfigService",
    "get_task_service",
    "get_dashboard_service",
    "get_config_service",
]
