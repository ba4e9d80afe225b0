"""Interactive prompts built on rich."""

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt

from .errors import PromptCancelled


class RichPrompter:
    """Asks the user for a choice or a line of text.

    Ctrl-C and end-of-input inside a prompt raise ``PromptCancelled``.
    The Ctrl-C path only applies when the SIGINT handler installed by
    ``cli_main`` is absent (library use and tests); with it installed the
    handler exits the process directly.
    """

    def __init__(self, console: Console):
        self.console = console

    def select(self, title: str, items: Sequence[str], default_index: int = 0) -> int:
        """Show numbered choices and return the index of the chosen one."""
        self.console.print(f"[bold cyan]{escape(title)}[/bold cyan]")
        for index, item in enumerate(items, start=1):
            marker = "[green]>[/green]" if index - 1 == default_index else " "
            self.console.print(f" {marker} {index}. {escape(item)}", soft_wrap=True)

        choices = [str(i) for i in range(1, len(items) + 1)]
        try:
            answer = Prompt.ask(
                "Number",
                choices=choices,
                default=str(default_index + 1),
                show_choices=False,
                console=self.console,
            )
        except (KeyboardInterrupt, EOFError):
            self.console.print()
            raise PromptCancelled()
        return int(answer) - 1

    def text(self, title: str, default: Optional[str] = None) -> str:
        """Ask for a non-empty line of text."""
        while True:
            try:
                if default is None:
                    answer = Prompt.ask(title, console=self.console)
                else:
                    answer = Prompt.ask(title, default=default, console=self.console)
            except (KeyboardInterrupt, EOFError):
                self.console.print()
                raise PromptCancelled()

            if answer.strip():
                return answer.strip()
            self.console.print("[yellow]A value is required[/yellow]")
