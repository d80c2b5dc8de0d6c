"""Native function descriptor models."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..exceptions import SourceError


@dataclass(frozen=True)
class Native:
    """A single entry of the natives catalog.

    Immutable once built. ``hashes`` maps an identifier scheme (e.g. a game
    build) to a hash string; both ``hashes`` values and ``jhash`` are matched
    by exact equality, while ``name`` is matched by substring.
    """

    key: str
    name: str
    jhash: str = ""
    comment: Optional[str] = None
    hashes: Mapping[str, str] = field(default_factory=dict, hash=False)
    namespace: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Native {self.key!r} has an empty name")
        # Freeze the hashes mapping so the record stays immutable
        object.__setattr__(self, "hashes", MappingProxyType(dict(self.hashes)))

    @property
    def has_comment(self) -> bool:
        """Check if the native carries a non-empty description."""
        return bool(self.comment)

    @classmethod
    def from_raw(cls, key: str, raw: Any, namespace: Optional[str] = None) -> "Native":
        """Build a Native from one raw JSON record.

        Field names are matched case-insensitively (``altName``, ``ALTNAME``
        and ``altname`` are the same field).

        Args:
            key: Lookup key of the record.
            raw: Decoded JSON object for the record.
            namespace: Group the record was listed under, if any.

        Returns:
            The validated Native.

        Raises:
            SourceError: If the record does not have the expected shape.
        """
        if not isinstance(raw, dict):
            raise SourceError(f"Native {key!r}: expected an object, got {type(raw).__name__}")

        fields = {str(k).lower(): v for k, v in raw.items()}

        name = fields.get("altname")
        if not isinstance(name, str) or not name:
            raise SourceError(f"Native {key!r}: missing or empty altName")

        jhash = fields.get("jhash")
        if jhash is None:
            jhash = ""
        if not isinstance(jhash, str):
            raise SourceError(f"Native {key!r}: jhash must be a string")

        comment = fields.get("comment")
        if comment is not None and not isinstance(comment, str):
            raise SourceError(f"Native {key!r}: comment must be a string")

        hashes = fields.get("hashes")
        if hashes is None:
            hashes = {}
        if not isinstance(hashes, dict) or not all(
            isinstance(v, str) for v in hashes.values()
        ):
            raise SourceError(f"Native {key!r}: hashes must map to strings")

        return cls(
            key=key,
            name=name,
            jhash=jhash,
            comment=comment,
            hashes={str(k): v for k, v in hashes.items()},
            namespace=namespace,
        )


@dataclass(frozen=True)
class MatchResult:
    """One accepted native plus the ranges to highlight.

    Ranges are half-open ``(start, end)`` pairs computed on the lower-cased
    name. Subtitle highlights are always empty.
    """

    native: Native
    key: str
    title_highlights: tuple[tuple[int, int], ...] = ()
    subtitle_highlights: tuple[tuple[int, int], ...] = ()
