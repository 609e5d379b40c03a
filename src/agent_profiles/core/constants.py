"""Shared path constants for the agent profile layout."""

from __future__ import annotations

RULES_DIR = ".agent"
WORKFLOWS_DIR = f"{RULES_DIR}/workflows"
SKILLS_ROOT_DIR = ".agents"
SKILLS_DIR = f"{SKILLS_ROOT_DIR}/skills"
SKILL_MANIFEST = "SKILL.md"
MARKDOWN_SUFFIX = ".md"

__all__ = [
    "MARKDOWN_SUFFIX",
    "RULES_DIR",
    "SKILL_MANIFEST",
    "SKILLS_DIR",
    "SKILLS_ROOT_DIR",
    "WORKFLOWS_DIR",
]
