"""Events and their storage in the EVENNEMENT table."""

from __future__ import annotations

from dataclasses import dataclass, fields

from .connection import Connection

_COLUMNS = {
    "name": "nom",
    "theme": "theme",
    "place": "lieu",
    "sponsors": "sponsors",
    "audience": "publiccible",
    "type": "type",
    "budget": "budget",
    "programme": "programme",
}


class EventValidationError(ValueError):
    """Raised when an event's fields are missing or invalid."""


@dataclass
class Event:
    """A planned event."""

    name: str = ""
    theme: str = ""
    place: str = ""
    type: str = ""
    audience: str = ""
    sponsors: str = ""
    budget: float = 0.0
    programme: str = ""

    def validate(self) -> None:
        """Check that every text field is filled and the budget is positive."""
        empty = [
            f.name
            for f in fields(self)
            if f.name != "budget" and not getattr(self, f.name)
        ]
        if empty:
            raise EventValidationError(
                "Veuillez remplir tous les champs: " + ", ".join(empty)
            )
        if self.budget <= 0:
            raise EventValidationError(
                "Veuillez entrer un budget valide (supérieur à 0)."
            )


class EventRepository:
    """Create, read, update, delete and search events in a database."""

    def __init__(self, connection: Connection) -> None:
        self.connection = connection

    @property
    def _db(self):
        return self.connection.database

    def create_schema(self) -> None:
        """Create the EVENNEMENT table if it does not exist."""
        with self._db as db:
            db.execute(
                "CREATE TABLE IF NOT EXISTS EVENNEMENT ("
                "nom TEXT PRIMARY KEY, theme TEXT, lieu TEXT, sponsors TEXT, "
                "publiccible TEXT, type TEXT, budget REAL, programme TEXT)"
            )

    @staticmethod
    def _params(event: Event) -> dict[str, object]:
        return {column: getattr(event, attr) for attr, column in _COLUMNS.items()}

    def add(self, event: Event) -> None:
        """Insert an event."""
        with self._db as db:
            db.execute(
                "INSERT INTO EVENNEMENT "
                "(nom, theme, lieu, sponsors, publiccible, type, budget, programme) "
                "VALUES (:nom, :theme, :lieu, :sponsors, :publiccible, :type, "
                ":budget, :programme)",
                self._params(event),
            )

    @staticmethod
    def _from_row(row) -> Event:
        values = {attr: row[column] for attr, column in _COLUMNS.items()}
        values["budget"] = float(values["budget"] or 0.0)
        return Event(**values)

    def all(self) -> list[Event]:
        """Return every stored event."""
        rows = self._db.execute("SELECT * FROM EVENNEMENT").fetchall()
        return [self._from_row(row) for row in rows]

    def delete(self, name: str) -> int:
        """Delete events with the given name; return how many were removed."""
        with self._db as db:
            cursor = db.execute("DELETE FROM EVENNEMENT WHERE nom = :nom", {"nom": name})
        return cursor.rowcount

    def update(self, event: Event) -> int:
        """Update the event with the same name; return how many rows changed."""
        with self._db as db:
            cursor = db.execute(
                "UPDATE EVENNEMENT SET theme = :theme, lieu = :lieu, "
                "sponsors = :sponsors, publiccible = :publiccible, type = :type, "
                "budget = :budget, programme = :programme WHERE nom = :nom",
                self._params(event),
            )
        return cursor.rowcount

    def search(
        self,
        *,
        name: str = "",
        theme: str = "",
        place: str = "",
        type: str = "",
        audience: str = "",
        sponsors: str = "",
        budget_min: float | None = None,
        budget_max: float | None = None,
        programme: str = "",
    ) -> list[Event]:
        """Return events matching every given criterion.

        Text criteria match as substrings; empty ones are ignored, as are
        budget bounds left as None.
        """
        clauses: list[str] = []
        params: dict[str, object] = {}
        text_criteria = [
            ("nom", name),
            ("theme", theme),
            ("lieu", place),
            ("type", type),
            ("publiccible", audience),
            ("sponsors", sponsors),
        ]
        for column, value in text_criteria:
            if value:
                clauses.append(f"AND {column} LIKE :{column}")
                params[column] = f"%{value}%"
        if budget_min is not None:
            clauses.append("AND budget >= :budget_min")
            params["budget_min"] = budget_min
        if budget_max is not None:
            clauses.append("AND budget <= :budget_max")
            params["budget_max"] = budget_max
        if programme:
            clauses.append("AND programme LIKE :programme")
            params["programme"] = f"%{programme}%"
        query = " ".join(["SELECT * FROM EVENNEMENT WHERE 1 = 1", *clauses])
        rows = self._db.execute(query, params).fetchall()
        return [self._from_row(row) for row in rows]