from .cli import cli, run
