import json
import sys
from pathlib import Path

import httpx
import typer
from pydantic import ValidationError

from transport_admin.config import settings
from transport_admin.logging import logger, get_session_id

app = typer.Typer(no_args_is_help=True)

@app.callback()
def main():
    """
    Transport Admin maintenance CLI.
    """
    pass

@app.command(name="doctor")
def doctor():
    """
    Check configuration and backend reachability.
    """
    logger.info("Running doctor check...")

    failures: list[str] = []
    passed = 0

    print("\n🩺 Transport Admin Doctor\n")

    # ── Check 1: Environment / Interpreter ──────────────────────────────────
    print("[Environment]")
    print(f"  Python:     {sys.version.split()[0]}")
    print(f"  Session ID: {get_session_id()}")
    passed += 1

    # ── Check 2: Token ──────────────────────────────────────────────────────
    print("\n[Configuration]")
    if settings.jwt_token:
        print("  JWT_TOKEN:                   ✅ Set")
        passed += 1
    else:
        print("  JWT_TOKEN:                   ❌ Missing")
        failures.append("JWT_TOKEN is not set — add it to .env")

    print(f"  API_BASE_URL:                {settings.API_BASE_URL}")
    print(f"  NEXT_PUBLIC_API_BASE_URL:    {settings.NEXT_PUBLIC_API_BASE_URL}")
    print(f"  DASHBOARD_API_URL:           {settings.DASHBOARD_API_URL}")

    # ── Check 3: Backend reachable ──────────────────────────────────────────
    print("\n[Backend]")
    try:
        httpx.get(settings.API_BASE_URL, timeout=5.0)
        print(f"  {settings.API_BASE_URL:<28} ✅ Reachable")
        passed += 1
    except httpx.HTTPError as e:
        print(f"  {settings.API_BASE_URL:<28} ❌ Unreachable")
        failures.append(f"Backend at {settings.API_BASE_URL} is unreachable: {e}")

    # ── Summary ──────────────────────────────────────────────────────────────
    total = passed + len(failures)
    print(f"\n{'─' * 50}")
    if failures:
        print(f"Result: {passed}/{total} checks passed\n")
        for msg in failures:
            print(f"  ❌ {msg}")
        print()
        raise typer.Exit(code=1)
    else:
        print(f"Result: {passed}/{total} checks passed — all good ✅")
        print()


@app.command(name="serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(8000, help="Bind port"),
):
    """Run the dashboard API the Streamlit pages read from."""
    import uvicorn
    logger.info(f"Serving dashboard API on {host}:{port} (upstream {settings.API_BASE_URL})")
    uvicorn.run("transport_admin.api.app:create_app", factory=True, host=host, port=port)


coordinates_app = typer.Typer(help="Vehicle request coordinate maintenance.")
app.add_typer(coordinates_app, name="coordinates")

def _load_entries(path: Path | None):
    from transport_admin.api.schemas.coordinates import CoordinatePatch
    from transport_admin.services.coordinates_service import DEFAULT_ENTRIES

    if path is None:
        return list(DEFAULT_ENTRIES)
    raw = json.loads(path.read_text(encoding="utf-8"))
    return [CoordinatePatch.model_validate(item) for item in raw]

@coordinates_app.command("add")
def add(
    file: Path | None = typer.Option(
        None, "--file", "-f", exists=True, dir_okay=False,
        help='JSON array of {"requestId": ..., "coordinates": {"lat": ..., "lng": ...}}',
    ),
):
    """Add coordinates to existing vehicle requests."""
    from transport_admin.domain.exceptions import AdminError
    from transport_admin.infra.backend import BackendGateway
    from transport_admin.services.coordinates_service import add_coordinates

    token = settings.jwt_token
    if not token:
        print("❌ Error: JWT_TOKEN environment variable is required")
        print("Please set JWT_TOKEN=your_token_here")
        raise typer.Exit(code=1)

    try:
        entries = _load_entries(file)
    except (ValueError, ValidationError) as e:
        print(f"❌ Invalid entries file: {e}")
        raise typer.Exit(code=1)

    print("🚀 Starting to add coordinates to vehicle requests...\n")
    print(f"Using API: {settings.API_BASE_URL}\n")

    if not entries:
        print("⚠️  No requests to process. Provide request IDs and coordinates with --file.")
        return

    try:
        with BackendGateway(settings.API_BASE_URL, token) as gateway:
            outcome = add_coordinates(gateway, entries)
    except (AdminError, ValidationError) as e:
        logger.error(f"Adding coordinates failed: {e}")
        print(f"❌ Error adding coordinates: {e}")
        raise typer.Exit(code=1)

    if outcome.batch is not None:
        result = outcome.batch
        print("📊 Batch Update Results:")
        print(f"   ✅ Success: {result.success}")
        print(f"   ❌ Failed: {result.failed}")
        if result.errors:
            print("\n❌ Errors:")
            for err in result.errors:
                print(f"   - Request {err.request_id}: {err.error}")
    elif outcome.single is not None:
        patched = outcome.single
        print(f"✅ Successfully added coordinates to request: {patched.id}")
        coords = patched.coordinates
        print(f"Coordinates: {coords.model_dump() if coords else None}")

if __name__ == "__main__":
    app()
