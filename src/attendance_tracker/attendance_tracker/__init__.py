"""Attendance Tracker package.

This package is organized by feature modules (users, attendance) with a thin
Flask controller layer over service/repository layers backed by SQLite.
"""
from __future__ import annotations

from .main import create_app, get_container

__all__ = ["create_app", "get_container"]
