"""CLI package bootstrap.

Defines root group (`cli`) in helpers and imports submodules so their
decorators register commands. Keep this file minimal to avoid circular
imports and duplication.
"""
from yjump.cli.helpers import cli  # root group
from yjump.cli import rank_cmds  # noqa: F401
from yjump.cli import pick_cmds  # noqa: F401
from yjump.cli import config_cmds  # noqa: F401

__all__ = ["cli"]
