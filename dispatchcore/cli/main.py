# dispatchcore/cli/main.py
import argparse
import json
import sys
from typing import List, Optional

from dispatchcore.config import DispatchSettings
from dispatchcore.core.audit import AuditJournal
from dispatchcore.core.errors import DispatchError, LoadError
from dispatchcore.core.executor import Dispatcher, render_error
from dispatchcore.core.tools import ToolCatalogue
from dispatchcore.utils.log import configure_logging


def build_dispatcher(settings: DispatchSettings) -> Dispatcher:
    """
    Catalogue + journal from settings.

    Raises:
        LoadError: An explicitly named tools file failed to load
    """
    dispatcher = Dispatcher(ToolCatalogue(), AuditJournal(settings.audit_dir))
    dispatcher.initialize(settings.tools_file)
    return dispatcher


def list_tools(args, settings: DispatchSettings) -> int:
    dispatcher = build_dispatcher(settings)
    if args.json:
        print(dispatcher.list_json())
        return 0

    tools = dispatcher.list()
    if not tools:
        print("No tools available.")
        return 0

    width = max(len(t["name"]) for t in tools)
    for tool in tools:
        print(f"{tool['name']:<{width}}  {tool['description']}")
    print(f"\n{len(tools)} tool(s)")
    return 0


def run_tool(args, settings: DispatchSettings) -> int:
    try:
        params = json.loads(args.params) if args.params else {}
    except json.JSONDecodeError as e:
        print(f"--params is not valid JSON: {e}", file=sys.stderr)
        return 2
    if not isinstance(params, dict):
        print("--params must be a JSON object", file=sys.stderr)
        return 2

    dispatcher = build_dispatcher(settings)
    try:
        print(dispatcher.invoke(args.tool, params))
    except DispatchError as e:
        print(render_error(e))
        return 1
    return 0


def check_tools(args, settings: DispatchSettings) -> int:
    catalogue = ToolCatalogue()
    if settings.tools_file is not None:
        outcome = catalogue.load_file(settings.tools_file)
    else:
        outcome = catalogue.load_default()

    if not outcome.ok:
        print(outcome.diagnostic, file=sys.stderr)
        return 1

    print(f"OK: {outcome.tools_loaded} tool(s) in {outcome.source}")
    return 0


def describe_tool(args, settings: DispatchSettings) -> int:
    dispatcher = build_dispatcher(settings)
    info = dispatcher.catalogue.describe(args.tool)
    if not info:
        print(f"Tool not found: {args.tool}", file=sys.stderr)
        return 1
    print(json.dumps(info, indent=2, ensure_ascii=False))
    return 0


def _add_tools_option(p: argparse.ArgumentParser) -> None:
    p.add_argument("--tools", help="Path to tools.yaml (default: discovery order)")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        "dispatchcore",
        description="dispatchcore - dynamic command dispatch from a YAML tool catalogue"
    )
    parser.add_argument("--log-level", help="Log level (default: $DISPATCHCORE_LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="command")

    # list - list catalogue
    list_p = sub.add_parser("list", help="List available tools")
    _add_tools_option(list_p)
    list_p.add_argument("--json", action="store_true", help="Print {\"tools\": [...], \"total\": n}")

    # run - execute one tool
    run_p = sub.add_parser("run", help="Execute a tool and print its JSON result")
    run_p.add_argument("tool", help="Tool name")
    run_p.add_argument("--params", "-p", help="Parameters as a JSON object")
    run_p.add_argument("--audit-log", "-a", help="Directory for daily audit logs (JSON lines)")
    _add_tools_option(run_p)

    # check - validate a tools file
    check_p = sub.add_parser("check", help="Validate a tools file")
    _add_tools_option(check_p)

    # describe - show one tool's schema
    describe_p = sub.add_parser("describe", help="Show a tool's parameter schema")
    describe_p.add_argument("tool", help="Tool name")
    _add_tools_option(describe_p)

    args = parser.parse_args(argv)

    # If no command provided, show help
    if not args.command:
        parser.print_help()
        return 0

    settings = DispatchSettings.from_env().override(
        tools_file=getattr(args, "tools", None),
        audit_dir=getattr(args, "audit_log", None),
        log_level=args.log_level,
    )
    configure_logging(settings.log_level)

    try:
        if args.command == "list":
            return list_tools(args, settings)
        elif args.command == "run":
            return run_tool(args, settings)
        elif args.command == "check":
            return check_tools(args, settings)
        elif args.command == "describe":
            return describe_tool(args, settings)
    except LoadError as e:
        print(str(e), file=sys.stderr)
        return 2

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
