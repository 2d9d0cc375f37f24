"""Typer CLI entrypoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import typer

from sonosctl.core.confirm import AutoConfirmer
from sonosctl.core.errors import SonosctlError
from sonosctl.core.model import Speaker
from sonosctl.core.render import render_info, render_track, render_volume, to_json
from sonosctl.core.service import SonosService

app = typer.Typer(help="Control your Sonos speakers from the command line")


@dataclass
class CliState:
    controller: str | None = None
    json_output: bool = False
    assume: bool | None = None


def _build_service(state: CliState) -> SonosService:
    if state.assume is None:
        return SonosService()
    return SonosService(confirmer=AutoConfirmer(state.assume))


def _print_warnings(service: SonosService) -> None:
    for warning in service.runtime_warnings:
        typer.echo(f"Warning: {warning}", err=True)


def _fail(exc: SonosctlError) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(code=1)


def _state(ctx: typer.Context) -> CliState:
    return ctx.ensure_object(CliState)


def _target(ctx: typer.Context) -> tuple[SonosService, Speaker]:
    state = _state(ctx)
    if not state.controller:
        raise typer.BadParameter("an IP address or room name is required", param_hint="'--controller'")
    service = _build_service(state)
    try:
        return service, service.resolve_controller(state.controller, show_progress=not state.json_output)
    finally:
        _print_warnings(service)


@app.callback()
def main(
    ctx: typer.Context,
    controller: str | None = typer.Option(
        None, "--controller", "-c", help="IP address or room name of the speaker"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Print JSON for programmatic use of the CLI"
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Accept a suggested room name without asking"),
    no_input: bool = typer.Option(False, "--no-input", help="Reject suggested room names without asking"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    assume: bool | None = None
    if yes:
        assume = True
    elif no_input:
        assume = False
    ctx.obj = CliState(controller=controller, json_output=json_output, assume=assume)


@app.command("track")
def show_track(ctx: typer.Context) -> None:
    """Show the current track information."""
    try:
        service, speaker = _target(ctx)
        track = service.track(speaker)
        typer.echo(to_json(track) if _state(ctx).json_output else render_track(track))
    except SonosctlError as exc:
        raise _fail(exc) from None


@app.command("next")
def next_track(ctx: typer.Context) -> None:
    """Skip to the next track."""
    try:
        service, speaker = _target(ctx)
        service.next(speaker)
    except SonosctlError as exc:
        raise _fail(exc) from None


@app.command("previous")
def previous_track(ctx: typer.Context) -> None:
    """Go back to the last track."""
    try:
        service, speaker = _target(ctx)
        service.previous(speaker)
    except SonosctlError as exc:
        raise _fail(exc) from None


@app.command("info")
def show_info(ctx: typer.Context) -> None:
    """Show information about the speaker."""
    try:
        service, speaker = _target(ctx)
        info = service.info(speaker)
        typer.echo(to_json(info) if _state(ctx).json_output else render_info(info))
    except SonosctlError as exc:
        raise _fail(exc) from None


@app.command("seek")
def seek(
    ctx: typer.Context,
    timestamp: str = typer.Argument(..., help="hh:mm:ss or mm:ss"),
) -> None:
    """Seek to a specific timestamp on the current track."""
    try:
        service, speaker = _target(ctx)
        service.seek(speaker, timestamp)
    except SonosctlError as exc:
        raise _fail(exc) from None


@app.command("volume")
def volume(
    ctx: typer.Context,
    level: int | None = typer.Argument(None, help="Percent volume to set the speaker to, 0-100"),
) -> None:
    """Get or set the volume of the speaker.

    If LEVEL is omitted, prints the current volume and mute state.
    """
    try:
        service, speaker = _target(ctx)
        if level is not None:
            service.set_volume(speaker, level)
            return
        current = service.volume(speaker)
        typer.echo(to_json(current) if _state(ctx).json_output else render_volume(current))
    except SonosctlError as exc:
        raise _fail(exc) from None


@app.command("rooms")
def rooms(
    ctx: typer.Context,
    invalidate: bool = typer.Option(False, "--invalidate", help="Rescan the network for speakers"),
) -> None:
    """List all of your speakers."""
    state = _state(ctx)
    service: SonosService | None = None
    try:
        service = _build_service(state)
        speakers = service.discover(show_progress=not state.json_output, invalidate=invalidate)
        speakers = sorted(speakers, key=lambda s: s.name)
        if state.json_output:
            typer.echo(to_json(speakers))
            return
        if not speakers:
            typer.echo("No speakers found")
            return
        for speaker in speakers:
            typer.echo(f"{speaker.name} ({speaker.ip})")
    except SonosctlError as exc:
        raise _fail(exc) from None
    finally:
        if service is not None:
            _print_warnings(service)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
