"""Command-line front end for the user directory.

This module serves as a CLI wrapper around the crud_app.core controllers.
"""
from __future__ import annotations
import argparse
import logging
import os
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from crud_app.core.api import ApiClient, ApiError, NotFoundError, REQUEST_TIMEOUT, UserService
from crud_app.core.feedback import AlwaysConfirm, NeverConfirm
from crud_app.core.form_controller import FormController
from crud_app.core.list_controller import ListController

logger = logging.getLogger("users_cli")


class ConsoleNotifier:
    def notify_success(self, message: str) -> None:
        print(f"[ok] {message}")

    def notify_error(self, message: str) -> None:
        print(f"[error] {message}", file=sys.stderr)


class ConsoleNavigator:
    """Screens do not exist on the command line; requests are only logged."""

    def go_to(self, path: str) -> None:
        logger.debug("navigation requested: %s", path)


class PromptConfirmation:
    def confirm(self, message: str) -> bool:
        try:
            answer = input(f"{message} [y/N] ")
        except EOFError:
            return False
        return answer.strip().lower() in {"y", "yes"}


def _print_users(users) -> None:
    for user in users:
        print(f"{user.id}\t{user.name}\t{user.email}\t{user.age}\t{user.profession}")


def _print_field_errors(form: FormController) -> None:
    for field, message in form.field_errors.items():
        print(f"  {field}: {message}", file=sys.stderr)


def main() -> None:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="User directory CLI")
    parser.add_argument("--api-url", default=os.environ.get("API_BASE_URL", "http://localhost:5000/api"))
    parser.add_argument("--timeout", type=float, default=float(os.environ.get("API_REQUEST_TIMEOUT", REQUEST_TIMEOUT)))
    parser.add_argument("--verbose", action="store_true")

    sub = parser.add_subparsers(dest="cmd")

    sl = sub.add_parser("list")
    sl.add_argument("--search", default="")

    sa = sub.add_parser("add")
    sa.add_argument("--name", required=True)
    sa.add_argument("--email", required=True)
    sa.add_argument("--age", required=True)
    sa.add_argument("--profession", required=True)

    se = sub.add_parser("edit")
    se.add_argument("id")
    se.add_argument("--name")
    se.add_argument("--email")
    se.add_argument("--age")
    se.add_argument("--profession")

    sd = sub.add_parser("delete")
    sd.add_argument("id")
    sd.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")

    args = parser.parse_args()

    if not args.cmd:
        parser.print_help()
        return

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    service = UserService(ApiClient(args.api_url, timeout=args.timeout))
    notifier = ConsoleNotifier()
    navigator = ConsoleNavigator()

    if args.cmd == "list":
        controller = ListController(service, notifier, NeverConfirm())
        controller.set_search_term(args.search)
        if not controller.fetch():
            sys.exit(1)
        _print_users(controller.filtered())
    elif args.cmd == "add":
        form = FormController.for_create(service, notifier, navigator)
        form.update({"name": args.name, "email": args.email, "age": args.age, "profession": args.profession})
        user = form.submit()
        if user is None:
            _print_field_errors(form)
            sys.exit(1)
        print(user.id)
    elif args.cmd == "edit":
        try:
            current = service.get_user(args.id)
        except NotFoundError:
            print(f"[edit] Error: user '{args.id}' not found", file=sys.stderr)
            sys.exit(1)
        except ApiError as e:
            print(f"[edit] Error: {e}", file=sys.stderr)
            sys.exit(1)
        form = FormController.for_edit(current, service, notifier, navigator)
        changes = {
            name: getattr(args, name)
            for name in ("name", "email", "age", "profession")
            if getattr(args, name) is not None
        }
        form.update(changes)
        if form.submit() is None:
            _print_field_errors(form)
            sys.exit(1)
    elif args.cmd == "delete":
        confirmation = AlwaysConfirm() if args.yes else PromptConfirmation()
        controller = ListController(service, notifier, confirmation)
        if not controller.remove(args.id):
            sys.exit(1)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
