# ArgBox CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance used by the argbox command-line entry point."""
from rich.console import Console

console = Console()
error_console = Console(stderr=True)
