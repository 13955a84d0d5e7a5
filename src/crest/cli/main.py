"""Crest CLI — talks to the daemon over HTTP."""

from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.table import Table

from crest import __version__
from crest.badges.status import STATUS_COLORS
from crest.core.config import get_client_settings

app = typer.Typer(
    name="crest",
    help="CI status reporting — step metrics and pipeline badges",
    no_args_is_help=True,
)
console = Console()


def _client() -> httpx.Client:
    settings = get_client_settings()
    return httpx.Client(
        base_url=settings.host,
        headers={"Authorization": f"Bearer {settings.api_key}"},
        timeout=30,
    )


def _request(method: str, path: str, **kwargs) -> httpx.Response:
    """Make an API call to the daemon."""
    with _client() as client:
        try:
            resp = client.request(method, f"/api/v1{path}", **kwargs)
        except httpx.ConnectError:
            settings = get_client_settings()
            console.print(f"[red]Error:[/red] Cannot connect to Crest daemon at {settings.host}")
            console.print("Start the daemon with: [bold]crestd[/bold]")
            raise typer.Exit(1)

    if resp.status_code >= 400:
        detail = resp.json().get("detail", resp.text) if resp.headers.get("content-type", "").startswith("application/json") else resp.text
        console.print(f"[red]Error {resp.status_code}:[/red] {detail}")
        raise typer.Exit(1)

    return resp


@app.command()
def badge(pipeline_id: str = typer.Argument(..., help="Pipeline ID")):
    """Print the badge URL for a pipeline's latest event."""
    resp = _request("GET", f"/pipelines/{pipeline_id}/badge")
    console.print(resp.headers.get("location", ""), soft_wrap=True)


@app.command()
def metrics(
    job_id: str = typer.Argument(..., help="Job ID"),
    start: Optional[str] = typer.Option(None, "--start", help="ISO-8601 lower bound on build time"),
    end: Optional[str] = typer.Option(None, "--end", help="ISO-8601 upper bound on build time"),
    step: Optional[str] = typer.Option(None, "--step", "-s", help="Only this step (default: all steps)"),
):
    """Show step metrics for a job."""
    params = {"startTime": start, "endTime": end, "stepName": step}
    records = _request(
        "GET",
        f"/jobs/{job_id}/metrics/steps",
        params={k: v for k, v in params.items() if v is not None},
    ).json()

    if not records:
        console.print("[dim]No step metrics[/dim]")
        return

    table = Table(title=f"Step metrics: {job_id}", show_lines=False)
    table.add_column("Build", style="bold")
    table.add_column("Step")
    table.add_column("Code")
    table.add_column("Duration (s)", justify="right")
    table.add_column("Started")

    for r in records:
        code = r.get("code")
        color = "dim" if code is None else STATUS_COLORS["success"] if code == 0 else STATUS_COLORS["failure"]
        duration = r.get("duration")
        table.add_row(
            r["build_id"][:8],
            r["step_name"],
            f"[{color}]{'—' if code is None else code}[/{color}]",
            "—" if duration is None else f"{duration:.1f}",
            r.get("start_time") or "—",
        )

    console.print(table)


@app.command()
def version():
    """Show Crest version."""
    console.print(f"crest v{__version__}")


@app.command()
def status():
    """Show daemon status."""
    with _client() as client:
        try:
            data = client.get("/health").json()
            console.print(f"[green]●[/green] Crest daemon v{data['version']} — running")
        except httpx.ConnectError:
            settings = get_client_settings()
            console.print(f"[red]●[/red] Daemon not running at {settings.host}")


if __name__ == "__main__":
    app()
