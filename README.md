# evenements

A small register of events kept in an SQLite database. Each event has a
name, a theme, a place, a type, a target audience, its sponsors, a budget
and a programme. Events can be added, listed, updated, deleted and
searched by any combination of text fields and by a budget range. A
simple keyword assistant answers questions about an event in French.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `evenements`:

```
evenements --help
```

The global option `--database PATH` chooses the SQLite file (default
`source_projet2A.db`). The `EVENNEMENT` table is created on first use.

| Action | What it does |
| --- | --- |
| `add --name ... --theme ... --place ... --type ... --audience ... --sponsors ... --budget ... --programme ...` | Check every field and insert the event. |
| `update` (same options as `add`) | Check every field and update the event with that name. |
| `delete NAME` | Delete the events with that name. |
| `list` | Print every event, one per line, fields separated by tabs. |
| `search "key=value ..."` | Print the events matching the filters (see below). |
| `chat MESSAGE [event options]` | Print the message and the assistant's reply about the event given by the options. |
| `details NAME` | Print a detail sheet headed with NAME. |

Example:

```
evenements add --name Festival --theme Musique --place Tunis --type Concert \
    --audience Étudiants --sponsors Mairie --budget 1500 --programme "Concerts"
evenements search "theme=Musique budgetMin=100 budgetMax=2000"
```

`add` and `update` exit with status 1 and a message when a text field is
empty, the budget is not above zero, or the database refuses the change.
The `chat` and `details` actions do not open the database.

## Using it from Python

```python
from evenements.connection import Connection
from evenements.event import Event, EventRepository

with Connection("events.db") as connection:
    repository = EventRepository(connection)
    repository.create_schema()
    repository.add(
        Event(
            name="Festival",
            theme="Musique",
            place="Tunis",
            type="Concert",
            audience="Étudiants",
            sponsors="Mairie",
            budget=1500.0,
            programme="Ouverture, concerts, clôture",
        )
    )
    for event in repository.all():
        print(event)
```

- `Connection(path)` wraps an SQLite connection. `open()` raises
  `DatabaseConnectionError` when the database cannot be opened, and using
  the repository on a closed connection raises it too. It works as a
  context manager.
- `Event.validate()` raises `EventValidationError` (a `ValueError`) naming
  the empty text fields, or when the budget is not above zero.
- `EventRepository` offers `create_schema()`, `add(event)`, `all()`,
  `update(event)` and `delete(name)`; `update` and `delete` return the
  number of rows affected. Names are the table's primary key, so adding a
  second event with the same name raises `sqlite3.IntegrityError`.

### Searching

`EventRepository.search()` takes keyword-only arguments `name`, `theme`,
`place`, `type`, `audience`, `sponsors`, `programme`, `budget_min` and
`budget_max`. Text fields match when they contain the given text; empty
ones are ignored, as are budget bounds left as `None`.

A search line of space-separated `key=value` pairs is turned into a
`SearchFilters` value by `parse_search_filters`:

```python
from evenements.assistant import parse_search_filters

filters = parse_search_filters("theme=Musique budgetMin=100 budgetMax=2000")
events = repository.search(**filters.as_kwargs())
```

The keys understood are `nom`, `theme`, `lieu`, `type`, `sponsors`,
`publiccible`, `programme`, `budgetMin` and `budgetMax`; other keys and
malformed pairs are ignored, and a later pair overrides an earlier one.
A budget value that is not a number reads as 0, and `-1` means no bound.

### Assistant

`chatbot_reply(message, event)` returns a short French answer. Greetings,
thanks and a few stock questions get a fixed reply; a message mentioning
the name (`nom`), `thème`, `lieu`, `sponsors`, `public cible`, `type`,
`budget` or `programme` gets that field of the event; anything else gets a
request to rephrase. Matching ignores case.

`event_details_text(name)` returns a detail sheet whose first line is the
given name; the remaining lines are fixed sample values, not read from
the database.

## What it does not do

There is no graphical window: the package works from the command line
and from Python only. It does not take screenshots of the event table,
and it does not send anything to a printer; `details` only prints the
sheet to standard output.