"""CLI entry point for conmenu.

Uses Typer for command routing with lazy loading for performance.
"""

from typing import Optional

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="conmenu",
    help="Text-driven console menus with validated input",
    no_args_is_help=False,
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Launch the demo menu if no command given."""
    if ctx.invoked_subcommand is None:
        from conmenu.cli.commands import cmd_demo

        cmd_demo()


@app.command()
def demo(
    attempts: Optional[int] = typer.Option(
        None, "--attempts", "-a", help="Tries allowed for each typed read"
    ),
    prompt: Optional[str] = typer.Option(
        None, "--prompt", "-p", help="Message shown above the menu options"
    ),
) -> None:
    """Run the contact book demo."""
    from conmenu.cli.commands import cmd_demo

    cmd_demo(attempts=attempts, prompt=prompt)


@app.command()
def status() -> None:
    """Show current configuration."""
    from conmenu.cli.commands import cmd_status

    cmd_status(None)


@app.command()
def attempts(count: int) -> None:
    """Set the attempt budget for typed reads."""
    from conmenu.cli.commands import cmd_attempts

    class Args:
        def __init__(self):
            self.attempts = count

    cmd_attempts(Args())


@app.command()
def prompt(text: str) -> None:
    """Set the default menu prompt."""
    from conmenu.cli.commands import cmd_prompt

    class Args:
        def __init__(self):
            self.prompt = text

    cmd_prompt(Args())


# Debug subcommand group
debug_app = typer.Typer(help="Debug mode commands")
app.add_typer(debug_app, name="debug")


@debug_app.command("on")
def debug_on() -> None:
    """Enable debug logging."""
    from conmenu.cli.commands import cmd_debug_on

    cmd_debug_on(None)


@debug_app.command("off")
def debug_off() -> None:
    """Disable debug logging."""
    from conmenu.cli.commands import cmd_debug_off

    cmd_debug_off(None)


# Env override subcommand group
env_app = typer.Typer(help="Manage env var overrides")
app.add_typer(env_app, name="env")


@env_app.command("list")
def env_list() -> None:
    """List env var overrides."""
    from conmenu.cli.commands import cmd_env_list

    cmd_env_list(None)


@env_app.command("set")
def env_set(key: str, value: str) -> None:
    """Set an env var override (e.g. CONMENU_ATTEMPTS 5)."""
    from conmenu.cli.commands import cmd_env_set

    class Args:
        def __init__(self):
            self.key = key
            self.value = value

    cmd_env_set(Args())


@env_app.command("unset")
def env_unset(key: str) -> None:
    """Remove an env var override."""
    from conmenu.cli.commands import cmd_env_unset

    class Args:
        def __init__(self):
            self.key = key

    cmd_env_unset(Args())


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
