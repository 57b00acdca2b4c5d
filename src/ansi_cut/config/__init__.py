"""
Configuration management for ansi_cut.
"""

from .config import Config, DemoConfig, LogConfig

__all__ = ["Config", "DemoConfig", "LogConfig"]
