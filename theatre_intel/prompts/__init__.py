"""
Prompt templates.
"""

from .system_prompt import SYSTEM_PROMPT, build_system_prompt

__all__ = ["SYSTEM_PROMPT", "build_system_prompt"]
