"""CLI helpers exposed for other modules."""

from .ui import ConsolePromptProvider, PromptProvider, multi_select_with_arrows

__all__ = ["ConsolePromptProvider", "PromptProvider", "multi_select_with_arrows"]
