"""Search-filter parsing, the event chatbot and event detail text."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from .event import Event

_NO_BOUND = -1.0

_FILTER_KEYS = {
    "nom": "name",
    "theme": "theme",
    "lieu": "place",
    "type": "type",
    "sponsors": "sponsors",
    "publiccible": "audience",
    "programme": "programme",
    "budgetMin": "budget_min",
    "budgetMax": "budget_max",
}

_SMALL_TALK = (
    ("bonjour", "Bonjour ! Comment puis-je vous aider ?"),
    ("comment ça va", "Je vais bien, merci ! Et vous ?"),
    ("quel est ton nom", "Je suis un chatbot, je n'ai pas de nom propre."),
    (
        "heure",
        "Je ne peux pas dire l'heure, mais vous pouvez vérifier sur votre appareil !",
    ),
    ("merci", "De rien ! N'hésitez pas à me poser d'autres questions."),
)

_FALLBACK_REPLY = "Désolé, je n'ai pas compris votre question. Pouvez-vous reformuler ?"


@dataclass
class SearchFilters:
    """Criteria for an advanced event search; empty text and None bounds are ignored."""

    name: str = ""
    theme: str = ""
    place: str = ""
    type: str = ""
    audience: str = ""
    sponsors: str = ""
    budget_min: float | None = None
    budget_max: float | None = None
    programme: str = ""

    def as_kwargs(self) -> dict[str, object]:
        """Keyword arguments for EventRepository.search."""
        return asdict(self)


def _to_double(text: str) -> float:
    """Convert text to a number, giving 0.0 when it is not one."""
    if "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


def parse_search_filters(text: str) -> SearchFilters:
    """Parse space-separated key=value pairs into search filters.

    Unknown keys and malformed pairs are ignored; a later pair overrides an
    earlier one with the same key. A budget bound of -1 means no bound.
    """
    filters = SearchFilters()
    for token in text.split(" "):
        parts = token.split("=")
        if len(parts) != 2:
            continue
        key, value = (part.strip() for part in parts)
        attr = _FILTER_KEYS.get(key)
        if attr is None:
            continue
        if attr in ("budget_min", "budget_max"):
            number = _to_double(value)
            setattr(filters, attr, None if number == _NO_BOUND else number)
        else:
            setattr(filters, attr, value)
    return filters


def chatbot_reply(message: str, event: Event) -> str:
    """Answer a message by keyword, using the given event for questions about it."""
    lowered = message.lower()
    for keyword, reply in _SMALL_TALK:
        if keyword in lowered:
            return reply
    field_replies = (
        ("nom", lambda: "L'événement s'appelle : " + event.name),
        ("thème", lambda: "Le thème de l'événement est : " + event.theme),
        ("lieu", lambda: "L'événement aura lieu à : " + event.place),
        ("sponsors", lambda: "Les sponsors de l'événement sont : " + event.sponsors),
        (
            "public cible",
            lambda: "Le public cible de cet événement est : " + event.audience,
        ),
        ("type", lambda: "Le type de budget de l'événement est : " + event.type),
        (
            "budget",
            lambda: f"Le budget de l'événement est de : {event.budget:g} dinars.",
        ),
        (
            "programme",
            lambda: "Le programme de l'événement comprend : " + event.programme,
        ),
    )
    for keyword, reply in field_replies:
        if keyword in lowered:
            return reply()
    return _FALLBACK_REPLY


def event_details_text(name: str) -> str:
    """Return the printable detail sheet for the named event."""
    return "\n".join(
        [
            "Nom: " + name,
            "Thème: Technologie",
            "Lieu: Paris",
            "Type: Conférence",
            "Public cible: Professionnels",
            "Sponsors: XYZ",
            "Budget: 5000 EUR",
            "Programme: Introduction à Qt",
        ]
    )