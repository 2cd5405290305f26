"""Toggl Track API access for togglpy."""

from .client import TogglClient, Workspace, auth_header

__all__ = ['TogglClient', 'Workspace', 'auth_header']
