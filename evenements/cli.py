"""Command-line interface for managing events."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from collections.abc import Sequence

from .assistant import chatbot_reply, event_details_text, parse_search_filters
from .connection import DEFAULT_DATABASE, Connection, DatabaseConnectionError
from .event import Event, EventRepository, EventValidationError


def _to_double(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def _add_event_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--name", default="")
    parser.add_argument("--theme", default="")
    parser.add_argument("--place", default="")
    parser.add_argument("--type", default="")
    parser.add_argument("--audience", default="")
    parser.add_argument("--sponsors", default="")
    parser.add_argument("--budget", default="")
    parser.add_argument("--programme", default="")


def _event_from_args(args: argparse.Namespace) -> Event:
    return Event(
        name=args.name,
        theme=args.theme,
        place=args.place,
        type=args.type,
        audience=args.audience,
        sponsors=args.sponsors,
        budget=_to_double(args.budget),
        programme=args.programme,
    )


def _format_event(event: Event) -> str:
    return "\t".join(
        [
            event.name,
            event.theme,
            event.place,
            event.sponsors,
            event.audience,
            event.type,
            f"{event.budget:g}",
            event.programme,
        ]
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="evenements", description="Manage events.")
    parser.add_argument("--database", default=DEFAULT_DATABASE)
    commands = parser.add_subparsers(dest="command", required=True)

    _add_event_options(commands.add_parser("add", help="add an event"))
    _add_event_options(commands.add_parser("update", help="modify an event"))
    delete = commands.add_parser("delete", help="delete an event by name")
    delete.add_argument("name")
    commands.add_parser("list", help="list all events")
    search = commands.add_parser("search", help="search with key=value filters")
    search.add_argument("query", nargs="?", default="")
    chat = commands.add_parser("chat", help="ask the chatbot about an event")
    chat.add_argument("message")
    _add_event_options(chat)
    details = commands.add_parser("details", help="print an event's detail sheet")
    details.add_argument("name")
    return parser


def _run_database_command(args: argparse.Namespace, repo: EventRepository) -> int:
    if args.command in ("add", "update"):
        event = _event_from_args(args)
        try:
            event.validate()
        except EventValidationError as exc:
            print(f"Erreur: {exc}", file=sys.stderr)
            return 1
        try:
            if args.command == "add":
                repo.add(event)
            else:
                repo.update(event)
        except sqlite3.Error as exc:
            failure = (
                "Erreur lors de l'ajout !"
                if args.command == "add"
                else "Erreur lors de la modification !"
            )
            print(f"{failure} {exc}", file=sys.stderr)
            return 1
        print("Évènement ajouté." if args.command == "add" else "Événement modifié avec succès.")
        return 0

    if args.command == "delete":
        if not args.name:
            print(
                "Erreur: Veuillez entrer le nom de l'événement à supprimer.",
                file=sys.stderr,
            )
            return 1
        try:
            repo.delete(args.name)
        except sqlite3.Error as exc:
            print(
                f"Erreur lors de la suppression de l'événement. {exc}", file=sys.stderr
            )
            return 1
        print("Événement supprimé avec succès.")
        return 0

    if args.command == "list":
        events = repo.all()
    else:
        events = repo.search(**parse_search_filters(args.query).as_kwargs())
    for event in events:
        print(_format_event(event))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the event manager command line; return the exit status."""
    args = _build_parser().parse_args(argv)

    if args.command == "chat":
        print("Vous: " + args.message)
        print("Chatbot: " + chatbot_reply(args.message, _event_from_args(args)))
        return 0
    if args.command == "details":
        print(event_details_text(args.name))
        return 0

    try:
        with Connection(args.database) as connection:
            repo = EventRepository(connection)
            repo.create_schema()
            return _run_database_command(args, repo)
    except DatabaseConnectionError as exc:
        print(f"connection failed.\n{exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())