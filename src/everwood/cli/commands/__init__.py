"""CLI command implementations for the everwood application.

This package contains subcommands for the everwood CLI, including:
- palette / mix / blend: Color harmony and paint mixing
- share: Encode and decode design share links
"""

from everwood.cli.commands.palette import blend_command, mix_command, palette_command
from everwood.cli.commands.share import share_app

__all__ = ["blend_command", "mix_command", "palette_command", "share_app"]
