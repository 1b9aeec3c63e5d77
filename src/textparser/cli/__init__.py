"""
textparser CLI package.

Commands are auto-discovered: top-level commands live in ``commands/`` and
grouped commands in a domain subfolder (``config/``). Each command module
exposes ``SUMMARY``, ``register_args(parser)`` and ``main(args) -> int``.
"""
from ._output import OutputFormatter
from ._args import (
    add_json_flag,
    add_repo_root_flag,
    add_verbose_flag,
    add_delimiter_flags,
    add_standard_flags,
)
from ._utils import get_repo_root, parse_var_assignments, load_bindings_file

__all__ = [
    "OutputFormatter",
    "add_json_flag",
    "add_repo_root_flag",
    "add_verbose_flag",
    "add_delimiter_flags",
    "add_standard_flags",
    "get_repo_root",
    "parse_var_assignments",
    "load_bindings_file",
]
