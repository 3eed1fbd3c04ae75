"""Console output that honours --silent and --verbose."""

from rich.console import Console
from rich.markup import escape


class Reporter:
    """
    Wraps a pair of rich consoles with the tool's verbosity rules.

    Normal messages are hidden by ``silent``, verbose messages need
    ``verbose``. Fatal errors and server responses are always shown.
    """

    def __init__(
        self,
        verbose: bool = False,
        silent: bool = False,
        console: Console | None = None,
        err_console: Console | None = None,
    ):
        self.verbose_enabled = verbose
        self.silent = silent
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.err_console = err_console or Console(stderr=True, highlight=False, soft_wrap=True)

    def log(self, message: str, style: str | None = None):
        if not self.silent:
            self.console.print(escape(message), style=style)

    def verbose(self, message: str):
        if self.verbose_enabled:
            self.console.print(escape(message), style="dim")

    def warning(self, message: str):
        self.log(message, style="yellow")

    def failure(self, message: str):
        self.log(message, style="red")

    def error(self, message: str):
        self.err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def echo(self, text: str):
        """Print a server response verbatim."""
        self.console.print(text, markup=False, emoji=False, highlight=False)
