"""Pure translation of one line of user text into a :data:`Command`.

Every function in this module is deterministic and side-effect free.
Validation failures raise :class:`~fairdesk.exceptions.ParseFailure`
with a :class:`~fairdesk.exceptions.ParseFailureReason`; no partial
command is ever returned.

Index arguments are typed 1-based and converted to 0-based here, so the
command layer only ever sees 0-based indices.
"""

from __future__ import annotations

from collections.abc import Sequence

from fairdesk.core.commands import (
    Add,
    ChooseVenue,
    Command,
    Confirm,
    Delete,
    Exit,
    FindCompany,
    FindIndustry,
    Help,
    ListCompanies,
    ListUnconfirmed,
    ListVenues,
    LoadSamples,
    Purge,
    Unconfirm,
    Unrecognized,
)
from fairdesk.exceptions import ParseFailure, ParseFailureReason

ADD_TAGS: tuple[str, ...] = ("n/", "i/", "c/", "e/")
"""Field tags for ``add``, in the order they must appear."""

_TAG_LABELS: dict[str, str] = {
    "n/": "company name",
    "i/": "industry",
    "c/": "contact number",
    "e/": "contact email",
}

CONTACT_NUMBER_LENGTH: int = 8

_HELP_HINT = "Type 'help' to see every command."


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def parse(line: str) -> Command:
    """Parse *line* into exactly one command.

    A blank line yields :class:`Unrecognized`, which executes as a no-op.

    Raises
    ------
    ParseFailure
        When the line is malformed or names an unknown command.
    """
    words = line.split()
    if not words:
        return Unrecognized(text=line)

    family = words[0]
    if family == "list":
        return _parse_list(words)
    if family == "add":
        return _parse_add(line)
    if family == "delete":
        return Delete(index=_single_index(words, "delete"))
    if family == "confirm":
        return Confirm(index=_single_index(words, "confirm"))
    if family == "unconfirm":
        return Unconfirm(index=_single_index(words, "unconfirm"))
    if family == "load":
        return _parse_load(words)
    if family == "purge":
        return Purge()
    if family == "choose":
        return _parse_choose(words)
    if family == "find":
        return _parse_find(line, words)
    if family == "help":
        return Help()
    if family == "exit":
        return Exit()

    raise ParseFailure(
        f"Unknown command: {family}",
        reason=ParseFailureReason.UNKNOWN_COMMAND,
        hint=_HELP_HINT,
    )


# ---------------------------------------------------------------------------
# Tagged fields
# ---------------------------------------------------------------------------

def extract_tagged_fields(text: str, tags: Sequence[str]) -> dict[str, str]:
    """Split *text* into values delimited by *tags*, in the given order.

    Field boundaries are located purely by substring search; there is
    no quoting or escaping.  Each value runs from the end of its tag to
    the start of the next tag (or the end of *text*) and is trimmed.

    Raises
    ------
    ParseFailure
        When a tag is missing, occurs more than once anywhere in *text*
        (even inside another field's value), or appears out of order.
    """
    positions: list[int] = []
    for tag in tags:
        count = text.count(tag)
        if count == 0:
            raise ParseFailure(
                f"Missing {_label(tag)} ({tag}).",
                reason=ParseFailureReason.MISSING_TAG,
                hint=_add_hint(),
            )
        if count > 1:
            raise ParseFailure(
                f"{tag} appears more than once; only one company can be added at a time.",
                reason=ParseFailureReason.DUPLICATE_TAG,
                hint=f"Field values must not contain '{tag}'.",
            )
        positions.append(text.index(tag))

    if positions != sorted(positions):
        raise ParseFailure(
            "Fields are out of order.",
            reason=ParseFailureReason.TAG_ORDER,
            hint=_add_hint(),
        )

    fields: dict[str, str] = {}
    ends = positions[1:] + [len(text)]
    for tag, start, end in zip(tags, positions, ends):
        fields[tag] = text[start + len(tag):end].strip()
    return fields


# ---------------------------------------------------------------------------
# Field validators
# ---------------------------------------------------------------------------

def is_valid_contact_number(value: str) -> bool:
    """Exactly eight ASCII digits."""
    return len(value) == CONTACT_NUMBER_LENGTH and value.isascii() and value.isdigit()


def is_valid_email(value: str) -> bool:
    """One ``@``, no whitespace, and not ending in ``@``."""
    return (
        value.count("@") == 1
        and not any(ch.isspace() for ch in value)
        and not value.endswith("@")
    )


# ---------------------------------------------------------------------------
# Per-family parsers
# ---------------------------------------------------------------------------

def _parse_list(words: list[str]) -> Command:
    _require_words(words, 2, "list companies|venues|unconfirmed")
    target = words[1]
    if target == "companies":
        return ListCompanies()
    if target == "venues":
        return ListVenues()
    if target == "unconfirmed":
        return ListUnconfirmed()
    raise ParseFailure(
        f"Cannot list '{target}'.",
        reason=ParseFailureReason.UNKNOWN_KEYWORD,
        hint="Use: list companies|venues|unconfirmed",
    )


def _parse_add(line: str) -> Add:
    remainder = line.strip()[len("add"):].strip()
    if not remainder:
        raise ParseFailure(
            "Nothing to add.",
            reason=ParseFailureReason.MISSING_ARGUMENT,
            hint=_add_hint(),
        )

    fields = extract_tagged_fields(remainder, ADD_TAGS)
    name, industry, number, email = (fields[tag] for tag in ADD_TAGS)

    for tag, value in (("n/", name), ("i/", industry)):
        if not value:
            raise ParseFailure(
                f"The {_label(tag)} cannot be empty.",
                reason=ParseFailureReason.EMPTY_FIELD,
            )
    if not is_valid_contact_number(number):
        raise ParseFailure(
            f"Invalid contact number: '{number}'.",
            reason=ParseFailureReason.INVALID_CONTACT_NUMBER,
            hint=f"Use exactly {CONTACT_NUMBER_LENGTH} digits, e.g. c/91234567",
        )
    if not is_valid_email(email):
        raise ParseFailure(
            f"Invalid email address: '{email}'.",
            reason=ParseFailureReason.INVALID_EMAIL,
            hint="Use a single address such as e/name@example.com",
        )

    return Add(
        name=name,
        industry=industry,
        contact_number=number,
        contact_email=email,
    )


def _parse_load(words: list[str]) -> LoadSamples:
    _require_words(words, 2, "load samples")
    if words[1] != "samples":
        raise ParseFailure(
            f"Cannot load '{words[1]}'.",
            reason=ParseFailureReason.UNKNOWN_KEYWORD,
            hint="Use: load samples",
        )
    return LoadSamples()


def _parse_choose(words: list[str]) -> ChooseVenue:
    usage = "choose venue INDEX [for COMPANY]"
    _require_words(words, 3, usage)
    if words[1] != "venue":
        raise ParseFailure(
            f"Cannot choose '{words[1]}'.",
            reason=ParseFailureReason.UNKNOWN_KEYWORD,
            hint=f"Use: {usage}",
        )
    venue_index = _to_index(words[2])
    if len(words) == 3:
        return ChooseVenue(venue_index=venue_index)
    if len(words) == 5 and words[3] == "for":
        return ChooseVenue(venue_index=venue_index, company_index=_to_index(words[4]))
    raise ParseFailure(
        "Unexpected words after the venue number.",
        reason=ParseFailureReason.UNKNOWN_KEYWORD,
        hint=f"Use: {usage}",
    )


def _parse_find(line: str, words: list[str]) -> Command:
    _require_words(words, 2, "find company|industry TERM")
    kind = words[1]
    if kind not in ("company", "industry"):
        raise ParseFailure(
            f"Cannot find by '{kind}'.",
            reason=ParseFailureReason.UNKNOWN_KEYWORD,
            hint="Use: find company TERM  or  find industry TERM",
        )

    parts = line.split(maxsplit=2)
    term = parts[2].strip() if len(parts) == 3 else ""
    if not term:
        raise ParseFailure(
            f"The target {'company name' if kind == 'company' else 'industry'} cannot be empty.",
            reason=ParseFailureReason.EMPTY_FIELD,
        )

    if kind == "industry":
        return FindIndustry(term=term.upper())
    return FindCompany(term=term)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _require_words(words: list[str], minimum: int, usage: str) -> None:
    if len(words) < minimum:
        raise ParseFailure(
            f"'{words[0]}' needs more information.",
            reason=ParseFailureReason.MISSING_ARGUMENT,
            hint=f"Use: {usage}",
        )


def _single_index(words: list[str], family: str) -> int:
    _require_words(words, 2, f"{family} INDEX")
    return _to_index(words[1])


def _to_index(token: str) -> int:
    """Convert a typed 1-based index to a 0-based one.

    Only ASCII digits with an optional leading sign are accepted.
    """
    digits = token[1:] if token[:1] in ("+", "-") else token
    if not (digits.isascii() and digits.isdigit()):
        raise ParseFailure(
            f"'{token}' is not a number.",
            reason=ParseFailureReason.INVALID_INTEGER,
            hint="Indices are whole numbers as shown by 'list'.",
        )
    number = int(token)
    if number < 1:
        raise ParseFailure(
            f"Index {number} is not valid.",
            reason=ParseFailureReason.INVALID_INDEX,
            hint="Indices start at 1.",
        )
    return number - 1


def _label(tag: str) -> str:
    return _TAG_LABELS.get(tag, tag)


def _add_hint() -> str:
    return "Use: add n/NAME i/INDUSTRY c/NUMBER e/EMAIL"
