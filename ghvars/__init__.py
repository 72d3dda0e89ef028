"""
ghvars - Client for the GitHub Actions Variables API.

This package provides a synchronous client for repository and environment scoped
variables, with explicit control over pagination of list endpoints.
"""

# Core interfaces
from ghvars.client import Client, get_default_client
from ghvars.paginator import Paginator
from ghvars.request_executor import RequestExecutor
from ghvars.httpx_request_executor import HttpxRequestExecutor
from ghvars.repository import Repository
from ghvars.page import Page

# Models
from ghvars.models import ActionsVariable, ActionsVariableList

# Configuration
from ghvars.config import ClientConfig, DefaultClientConfig, get_config

# Errors
from ghvars.ghvars_error import GhvarsError, HttpError, NotFoundError

__all__ = [
    # Core interfaces
    'Client',
    'get_default_client',
    'Paginator',
    'RequestExecutor',
    'HttpxRequestExecutor',
    'Repository',
    'Page',

    # Models
    'ActionsVariable',
    'ActionsVariableList',

    # Configuration
    'ClientConfig',
    'DefaultClientConfig',
    'get_config',

    # Errors
    'GhvarsError',
    'HttpError',
    'NotFoundError',
]
