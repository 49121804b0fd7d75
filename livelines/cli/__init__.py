"""CLI command handlers for livelines.

This module contains the implementations of the livelines verbs, kept
out of main.py so argument parsing stays separate from behaviour.
"""

from livelines.cli.demo import cmd_demo
from livelines.cli.run import cmd_run

__all__ = ["cmd_demo", "cmd_run"]
