"""
Voice command shortcuts.
"""

from .service import VoiceCommand, CommandAction, CommandResult, VoiceCommandMatcher

__all__ = ["VoiceCommand", "CommandAction", "CommandResult", "VoiceCommandMatcher"]
