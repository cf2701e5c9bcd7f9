import os
import sys
import json
import typer
from pathlib import Path
from postboard.config import settings
from postboard.domain.exceptions import NotFoundError
from postboard.logging import logger, get_request_id

app = typer.Typer(no_args_is_help=True)

@app.callback()
def main():
    """
    Postboard dashboard CLI.
    """
    pass

@app.command(name="doctor")
def doctor():
    """
    Check system configuration and environment health.
    """
    logger.info("Running doctor check...")

    failures: list[str] = []
    passed = 0

    print("\n🩺 Postboard Doctor\n")

    # ── Check 1: Environment / Interpreter ──────────────────────────────────
    print("[Environment]")
    print(f"  Python: {sys.version.split()[0]}")
    print(f"  Prefix: {sys.prefix}")
    print(f"  Request ID: {get_request_id()}")
    passed += 1

    # ── Check 2: Auth collaborator ───────────────────────────────────────────
    print("\n[Auth]")
    print(f"  AUTH_URL:        {settings.AUTH_URL}")
    print(f"  LOGIN_PATH:      {settings.LOGIN_PATH}")
    if settings.AUTH_API_KEY and settings.AUTH_API_KEY.get_secret_value():
        print("  AUTH_API_KEY:    ✅ Set")
        passed += 1
    else:
        print("  AUTH_API_KEY:    ❌ Missing")
        failures.append("POSTBOARD_AUTH_API_KEY is not set — add it to .env")

    # ── Check 3: Dashboard timezone ──────────────────────────────────────────
    print("\n[Dashboard]")
    print(f"  UPCOMING_LIMIT:  {settings.UPCOMING_LIMIT}")
    from postboard.services.dashboard_service import configured_timezone
    try:
        tz = configured_timezone()
        print(f"  TIMEZONE:        ✅ {tz or 'server local time'}")
        passed += 1
    except Exception as e:
        print(f"  TIMEZONE:        ❌ {settings.TIMEZONE!r} ({e})")
        failures.append(f"POSTBOARD_TIMEZONE {settings.TIMEZONE!r} is not a known IANA zone")

    # ── Check 4: Database location ───────────────────────────────────────────
    print("\n[Database]")
    url = settings.database_url
    if not url.startswith("sqlite:///"):
        print(f"  {url.split('@')[-1]:<28} ⚠️  Skipped (not a SQLite file)")
    else:
        db_file = Path(url.removeprefix("sqlite:///"))
        data_dir = db_file.parent
        if db_file.exists():
            if os.access(db_file, os.W_OK):
                print(f"  {db_file}    ✅ Exists and writable")
                passed += 1
            else:
                print(f"  {db_file}    ❌ Exists but NOT writable")
                failures.append(f"{db_file} exists but is not writable — check file permissions")
        elif data_dir.exists() and os.access(data_dir, os.W_OK):
            print(f"  {data_dir}/    ✅ Writable (db init can create the database)")
            passed += 1
        elif data_dir.exists():
            print(f"  {data_dir}/    ❌ Not writable")
            failures.append(f"{data_dir}/ is not writable — db init cannot create the database")
        else:
            print(f"  {data_dir}/    ⚠️  Missing (db init will create it)")

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


db_app = typer.Typer(help="Database management commands.")
app.add_typer(db_app, name="db")

@db_app.command("init")
def init():
    """Initialize the database tables."""
    from postboard.db import init_db
    try:
        init_db()
        logger.info("Database initialized successfully.")
        print("✅ Database initialized.")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        print(f"❌ Failed: {e}")
        raise typer.Exit(code=1)

dashboard_app = typer.Typer(help="Dashboard inspection commands.")
app.add_typer(dashboard_app, name="dashboard")

@dashboard_app.command("show")
def show(
    identity_id: str,
    as_json: bool = typer.Option(False, "--json", help="Print the view model as JSON"),
):
    """Run one aggregation pass for a profile and print the result."""
    from postboard.infra.db.uow import UnitOfWork
    from postboard.infra.db.dashboard_store import SqlDashboardStore
    from postboard.services.dashboard_service import DashboardService
    from postboard.services.profile_service import ProfileService

    with UnitOfWork() as uow:
        try:
            identity = ProfileService(uow).get_identity(identity_id)
        except NotFoundError as e:
            print(f"❌ {e.message}")
            raise typer.Exit(code=1)
        view = DashboardService(SqlDashboardStore(uow)).aggregate(identity)

    if as_json:
        print(json.dumps(view.model_dump(mode="json", by_alias=True), indent=2))
        return

    stats = view.stats
    print(f"Dashboard for {view.display_name or identity.id}")
    print(f"  Scheduled posts: {stats.scheduled_posts}")
    print(f"  Active groups:   {stats.active_groups}")
    print(f"  Territories:     {stats.territories}")
    print(f"  Posted today:    {stats.posted_today}")
    if not view.upcoming:
        print("No upcoming posts.")
        return
    print("Upcoming:")
    for i, post in enumerate(view.upcoming, 1):
        group = post.group_name or "no group"
        print(f"{i}. {post.scheduled_for:%Y-%m-%d %H:%M} [{post.status.value}] {group}: {post.content[:60]}")

if __name__ == "__main__":
    app()
