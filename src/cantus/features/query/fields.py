"""Where: src/cantus/features/query/fields.py
What: Field names the Cantus API accepts in search queries and request headers.
Why: Validate queries locally before any request is sent.
"""

from __future__ import annotations

from typing import Final

VALID_FIELDS: Final[frozenset[str]] = frozenset(
    {
        "id", "name", "description", "mass_or_office", "date", "feast_code", "incipit",
        "source", "marginalia", "folio", "sequence", "office", "genre", "position",
        "cantus_id", "feast", "mode", "differentia", "finalis", "full_text",
        "full_text_manuscript", "full_text_simssa", "volpiano", "notes",
        "cao_concordances", "siglum", "proofreader", "melody_id", "title", "rism",
        "provenance", "century", "notation_style", "editors", "indexers", "summary",
        "liturgical_occasion", "indexing_notes", "indexing_date", "display_name",
        "given_name", "family_name", "institution", "city", "country", "source_id",
        "office_id", "genre_id", "feast_id", "provenance_id", "century_id",
        "notation_style_id", "any", "type",
    }
)

# Used for request headers, never written into the query string.
HEADER_FIELDS: Final[tuple[str, ...]] = ("page", "per_page", "fields", "sort")

ANY_FIELD: Final[str] = "any"
TYPE_FIELD: Final[str] = "type"


__all__ = ["ANY_FIELD", "HEADER_FIELDS", "TYPE_FIELD", "VALID_FIELDS"]
