"""Run git-branchstat as a module."""

from .cli import app

app(prog_name="git-branchstat")
