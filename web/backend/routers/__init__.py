#!/usr/bin/env python3
"""API route handlers."""

from .auth import router as auth_router
from .reports import router as reports_router
from .admin import router as admin_router
from .stats import router as stats_router
