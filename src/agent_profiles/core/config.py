"""Static configuration for the agent-profiles CLI."""

from __future__ import annotations

APP_NAME = "agent-profiles"
APP_VERSION = "1.0.0"

GITHUB_API_URL = "https://api.github.com"
GITHUB_RAW_URL = "https://raw.githubusercontent.com"
USER_AGENT = APP_NAME
HTTP_TIMEOUT = 30.0

GITHUB_TOKEN_ENV_VARS = ("GH_TOKEN", "GITHUB_TOKEN")
TEMPLATE_ROOT_ENV_VAR = "AGENT_PROFILES_TEMPLATE_ROOT"

# Prompt layout
PAGE_SIZE = 15
LABEL_WIDTH = 25

BANNER = """
 █████╗  ██████╗ ███████╗███╗   ██╗████████╗
██╔══██╗██╔════╝ ██╔════╝████╗  ██║╚══██╔══╝
███████║██║  ███╗█████╗  ██╔██╗ ██║   ██║
██╔══██║██║   ██║██╔══╝  ██║╚██╗██║   ██║
██║  ██║╚██████╔╝███████╗██║ ╚████║   ██║
╚═╝  ╚═╝ ╚═════╝ ╚══════╝╚═╝  ╚═══╝   ╚═╝
"""

TAGLINE = "Rules, Workflows and Skills for your AI coding agent"

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "BANNER",
    "GITHUB_API_URL",
    "GITHUB_RAW_URL",
    "GITHUB_TOKEN_ENV_VARS",
    "HTTP_TIMEOUT",
    "LABEL_WIDTH",
    "PAGE_SIZE",
    "TAGLINE",
    "TEMPLATE_ROOT_ENV_VAR",
    "USER_AGENT",
]
