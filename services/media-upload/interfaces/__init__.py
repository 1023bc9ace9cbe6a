"""Abstract interfaces for infrastructure dependencies."""

from .media_tool import MediaTool

__all__ = ["MediaTool"]
