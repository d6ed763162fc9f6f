"""PeopleHub dashboard — command-line front end.

Usage:
    peoplehub tabs                              # main strip + "More" overflow
    peoplehub show                              # active tab for the default employee
    peoplehub show --tab job --employee emp-1
    peoplehub switch benefits                   # active tab, kept for later runs
    peoplehub customize --remove assets --remove training
    peoplehub customize --add assets
    peoplehub customize --reset

Exit codes:
    0 = ok
    1 = employee not found / request failed
    2 = bad arguments (unknown tab id, ...)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Any, Optional

from peoplehub.client.api import ApiClient
from peoplehub.client.dashboard import Dashboard, TabView
from peoplehub.client.state import DashboardState
from peoplehub.client.store import ClientStore
from peoplehub.common.log import configure_logging
from peoplehub.config import settings
from peoplehub.layout.customization import MIN_ENABLED_MESSAGE
from peoplehub.layout.tabs import UnknownTabError

logger = logging.getLogger("peoplehub.cli")


# ══════════════════════════════════════════════════════════════════════
# Rendering
# ══════════════════════════════════════════════════════════════════════

HIDDEN_KEYS = {"id", "employee_id", "profile_data", "created_at", "updated_at"}


def _print_tabs(dashboard: Dashboard) -> None:
    main, overflow = dashboard.tabs
    marks = [
        f"[{tab.label}]" if tab.id == dashboard.active_tab else tab.label
        for tab in main
    ]
    print("Tabs: " + "  ".join(marks))
    if overflow:
        print("More: " + ", ".join(tab.label for tab in overflow))


def _format_record(record: dict[str, Any]) -> str:
    return ", ".join(
        f"{key}={value}"
        for key, value in record.items()
        if key not in HIDDEN_KEYS and value not in (None, "")
    )


def _print_view(view: TabView) -> None:
    print(f"== {view.tab.label} ==")
    if view.employee:
        emp = view.employee
        print(f"{emp['full_name']} — {emp.get('job_title') or 'No title'}")
        print(f"  {emp.get('department') or '-'} / {emp.get('location') or '-'}"
              f"  hired {emp.get('hire_date') or '-'}")
    for kind, records in view.sections.items():
        print(f"\n{kind} ({len(records)})")
        if not records:
            print("  (none)")
        for record in records:
            print(f"  - {_format_record(record)}")


def _print_notifications(state: DashboardState) -> None:
    for note in state.notifications.active:
        stream = sys.stderr if note.type == "error" else sys.stdout
        print(f"[{note.type.value}] {note.message}", file=stream)


# ══════════════════════════════════════════════════════════════════════
# Commands
# ══════════════════════════════════════════════════════════════════════

def cmd_tabs(args: argparse.Namespace, dashboard: Dashboard) -> int:
    _print_tabs(dashboard)
    return 0


def cmd_switch(args: argparse.Namespace, dashboard: Dashboard) -> int:
    if not dashboard.switch_tab(args.tab_id):
        print(f"Tab '{args.tab_id}' is not enabled; use 'customize --add {args.tab_id}'.",
              file=sys.stderr)
        return 2
    _print_tabs(dashboard)
    return 0


def cmd_customize(args: argparse.Namespace, dashboard: Dashboard) -> int:
    session = dashboard.customize()
    customizer = dashboard.customizer
    if args.reset:
        for tab in dashboard.state.registry:
            customizer.add_to_draft(session, tab.id)
    for tab_id in args.add:
        customizer.add_to_draft(session, tab_id)
    for tab_id in args.remove:
        if not customizer.remove_from_draft(session, tab_id):
            reason = session.last_error or f"'{tab_id}' is not enabled"
            print(f"Cannot remove {tab_id}: {reason}", file=sys.stderr)

    if not session.is_dirty:
        customizer.discard(session)
        print("No changes.")
    else:
        dashboard.save_layout(session)
    _print_tabs(dashboard)
    return 0


async def cmd_show(args: argparse.Namespace, dashboard: Dashboard) -> int:
    if args.tab and not dashboard.switch_tab(args.tab):
        print(f"Tab '{args.tab}' is not enabled; use 'customize --add {args.tab}'.",
              file=sys.stderr)
        return 2

    employee = await dashboard.load_employee(args.employee)
    if dashboard.not_found:
        print("Employee Not Found", file=sys.stderr)
        print(f"No employee with id '{args.employee}' exists.", file=sys.stderr)
        return 1
    if employee is None:
        return 1

    _print_tabs(dashboard)
    print()
    _print_view(await dashboard.render_tab())
    return 0


# ══════════════════════════════════════════════════════════════════════
# Entry point
# ══════════════════════════════════════════════════════════════════════

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="peoplehub",
        description="PeopleHub employee dashboard",
    )
    parser.add_argument("--base-url", default=settings.API_BASE_URL,
                        help="API server (default: %(default)s)")
    parser.add_argument("--state-dir", default=None,
                        help="Directory for saved preferences (default: CLIENT_STATE_DIR)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("tabs", help="Show the tab strip and overflow menu")

    switch = sub.add_parser("switch", help="Make a tab active")
    switch.add_argument("tab_id")

    show = sub.add_parser("show", help="Render a tab for an employee")
    show.add_argument("--employee", default=settings.DEFAULT_EMPLOYEE_ID)
    show.add_argument("--tab", default=None, help="Tab id (default: first enabled tab)")

    customize = sub.add_parser("customize", help="Edit which tabs are shown")
    customize.add_argument("--add", action="append", default=[], metavar="TAB")
    customize.add_argument("--remove", action="append", default=[], metavar="TAB")
    customize.add_argument("--reset", action="store_true", help="Enable every tab")

    return parser


async def run(args: argparse.Namespace, api: Optional[ApiClient] = None) -> int:
    state = DashboardState(ClientStore(args.state_dir))
    owns_api = api is None
    api = api or ApiClient(args.base_url)
    dashboard = Dashboard(api, state)
    try:
        if args.command == "tabs":
            return cmd_tabs(args, dashboard)
        if args.command == "customize":
            return cmd_customize(args, dashboard)
        if args.command == "switch":
            return cmd_switch(args, dashboard)
        return await cmd_show(args, dashboard)
    except UnknownTabError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    finally:
        _print_notifications(state)
        if owns_api:
            await api.aclose()


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging("debug" if args.verbose else "warning")
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
