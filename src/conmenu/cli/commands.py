"""CLI command handlers."""

from typing import Optional

from conmenu.utils.config import Config, get_conmenu_dir
from conmenu.utils.debug import debug_config


def cmd_status(args):
    """Show current configuration."""
    from rich.markup import escape

    from conmenu.cli.ui import console

    config = Config(get_conmenu_dir())

    console.print(f"[bold]Attempts:[/bold] {config.attempts}")
    console.print(f"[bold]Prompt:[/bold] {escape(config.default_prompt)}")

    debug_color = "green" if config.debug else "dim"
    console.print(
        f"[bold]Debug:[/bold] [{debug_color}]{'on' if config.debug else 'off'}[/{debug_color}]"
    )
    log_color = "green" if config.error_log else "dim"
    console.print(
        f"[bold]Error log:[/bold] [{log_color}]{'on' if config.error_log else 'off'}[/{log_color}]"
    )
    console.print(f"[bold]Config:[/bold] [dim]{config.conmenu_dir}[/dim]")


def cmd_attempts(args):
    """Set the attempt budget for typed reads."""
    from conmenu.cli.ui import console

    config = Config(get_conmenu_dir())
    config.set_attempts(args.attempts)
    debug_config("Attempts saved", requested=args.attempts, stored=config.attempts)
    if config.attempts != args.attempts:
        console.print(
            f"[yellow]Attempts must be at least 1, reset to {config.attempts}[/yellow]"
        )
    else:
        console.print(f"[green]Attempts set to {config.attempts}[/green]")


def cmd_prompt(args):
    """Set the default menu prompt."""
    from conmenu.cli.ui import console
    from conmenu.utils.exceptions import ConfigurationError

    config = Config(get_conmenu_dir())
    try:
        config.set_default_prompt(args.prompt)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)
    debug_config("Default prompt saved", prompt=config.default_prompt)
    console.print("[green]Default prompt updated[/green]")


def cmd_debug_on(args):
    """Enable debug logging."""
    from conmenu.cli.ui import console
    from conmenu.utils.debug import reload_config

    config = Config(get_conmenu_dir())
    config.set_debug(True)
    reload_config()
    console.print("[green]Debug mode enabled[/green]")
    console.print(f"Logs: {config.debug_log_path}")


def cmd_debug_off(args):
    """Disable debug logging."""
    from conmenu.cli.ui import console
    from conmenu.utils.debug import reload_config

    config = Config(get_conmenu_dir())
    config.set_debug(False)
    reload_config()
    console.print("Debug mode disabled")


def cmd_env_list(args):
    """List all env var overrides."""
    from rich.markup import escape

    from conmenu.cli.ui import console

    config = Config(get_conmenu_dir())
    env_vars = config.list_env()

    if not env_vars:
        console.print("No env var overrides set.")
        return

    for key, value in sorted(env_vars.items()):
        console.print(escape(f"{key}={value}"))


def cmd_env_set(args):
    """Set an env var override."""
    from rich.markup import escape

    from conmenu.cli.ui import console
    from conmenu.utils.debug import reload_config

    config = Config(get_conmenu_dir())
    if Config.setting_for(args.key) is None:
        console.print(
            f"[yellow]{escape(args.key)} is not a conmenu setting "
            f"({', '.join(Config.SETTINGS)})[/yellow]"
        )
        raise SystemExit(1)
    config.set_env(args.key, args.value)
    reload_config()
    debug_config("Env override saved", key=args.key, value=args.value)
    console.print(escape(f"Set {args.key}={args.value}"))


def cmd_env_unset(args):
    """Unset an env var override."""
    from rich.markup import escape

    from conmenu.cli.ui import console
    from conmenu.utils.debug import reload_config

    config = Config(get_conmenu_dir())
    if config.unset_env(args.key):
        reload_config()
        console.print(escape(f"Unset {args.key}"))
    else:
        console.print(escape(f"{args.key} not found"))


def cmd_demo(attempts: Optional[int] = None, prompt: Optional[str] = None):
    """Run the contact book demo with the configured session settings."""
    from conmenu.cli.demo import run_demo
    from conmenu.cli.ui import console
    from conmenu.core.session import Session
    from conmenu.utils.exceptions import InputClosedError

    config = Config(get_conmenu_dir())
    session = Session.from_config(config)
    if attempts is not None:
        session.attempts = attempts
    if prompt:
        session.default_prompt = prompt
    debug_config("Session ready", attempts=session.attempts, prompt=session.default_prompt)

    try:
        run_demo(session)
    except InputClosedError:
        # stdin closed (Ctrl+D or piped input ran out)
        console.print()
