"""ParserOptions: immutable run options for the validation engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Immutable options fixed when a ConfigParser is constructed.

    Attributes:
        stop_on_first_error: Raise the first validation error as soon as it is
            found. When False the whole tree is traversed and a
            ``ConfigParseFailureError`` is raised at the end.  Default False.
        prune_unlisted_fields: Remove object fields that have no child element.
            Applied only after a run that found no error at all.  Default False.
        prune_meta_fields: Remove object fields whose key starts with
            ``meta_field_prefix``, whether or not the run found errors.
            Default True.
        meta_field_prefix: Marker that makes a key a meta field (``$comment``,
            ``$schema``).  Default ``"$"``.
    """

    stop_on_first_error: bool = False
    prune_unlisted_fields: bool = False
    prune_meta_fields: bool = True
    meta_field_prefix: str = "$"

    def __post_init__(self) -> None:
        if not self.meta_field_prefix:
            msg = "meta_field_prefix must be a non-empty string"
            raise ValueError(msg)
