# Ncline Command Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""Commands for listing, describing and leaving the shell."""
from __future__ import annotations

from rich.markup import escape
from rich.table import Table

from ncline import output
from ncline.context import ShellContext
from ncline.signals import QuitSignal
from ncline.themes import OneColors


class CommandManagerCommands:
    def __init__(self, context: ShellContext):
        self.context = context

    def show_cmds(self):
        """List every command with its signature."""
        registry = self.context.get_registry()
        output.heading("Available commands:")
        for descriptor in registry.sorted_descriptors():
            self.context.console.print(escape(descriptor.signature), style="signature")

    def help(self, command):
        """Show the signature and manual entry of a command."""
        if command is None:
            output.throw_error(
                "Provide the name of a command, e.g. 'help show_cmds'. "
                "Use 'show_cmds' to list them all."
            )
        descriptor = self.context.get_registry().get(command)
        if descriptor is None:
            output.throw_error(f"'{command}' is not a recognized command.")

        console = self.context.console
        console.print(escape(descriptor.signature), style="signature")
        console.print(f"[{OneColors.COMMENT_GREY}]defined in {escape(descriptor.source_path)}[/]")
        manual = descriptor.manual
        if not manual:
            output.msg("No manual entry for this command.")
            return
        if not isinstance(manual, dict):
            console.print(escape(str(manual)))
            return

        if manual.get("description"):
            console.print(escape(str(manual["description"])))
        parameters = manual.get("parameters") or {}
        if isinstance(parameters, dict) and parameters:
            table = Table(show_header=True, header_style=OneColors.MAGENTA_b, box=None)
            table.add_column("Parameter", style=OneColors.CYAN)
            table.add_column("Description")
            for name, description in parameters.items():
                table.add_row(escape(str(name)), escape(str(description)))
            console.print(table)
        for example in manual.get("examples") or []:
            console.print(f"  [{OneColors.GREEN}]{escape(str(example))}[/]")

    def about(self):
        output.heading(f"ncline v{self.context.version}")
        output.msg(
            "Type a command name followed by its arguments, separated by spaces. "
            'Wrap values containing spaces in double quotes: create_alias docs "C:\\My Docs". '
            "Pass arguments by name inside brackets: create_alias [filepath:C:\\temp alias:tmp]. "
            "Use null to leave an argument empty. "
            "Type 'show_cmds' to list commands, 'help <command>' for details, "
            "and press Tab to complete command names."
        )

    def exit(self):
        raise QuitSignal("exit command")


def setup(context: ShellContext) -> CommandManagerCommands:
    return CommandManagerCommands(context)
