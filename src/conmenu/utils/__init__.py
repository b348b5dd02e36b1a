"""Utilities for conmenu."""

from conmenu.utils.config import Config, get_conmenu_dir
from conmenu.utils.exceptions import ConmenuError

__all__ = ["Config", "ConmenuError", "get_conmenu_dir"]
