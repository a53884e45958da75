"""Output representations for duration conversion."""

from pyisoduration.representation._base import OutputFormat, Representation
from pyisoduration.representation.elapsed import ElapsedRepresentation
from pyisoduration.representation.field_map import FieldMapRepresentation
from pyisoduration.representation.iso8601 import ISO8601Representation
from pyisoduration.representation.total_seconds import TotalSecondsRepresentation

__all__ = [
    "OutputFormat",
    "Representation",
    "ElapsedRepresentation",
    "FieldMapRepresentation",
    "ISO8601Representation",
    "TotalSecondsRepresentation",
    "get_representation",
]

_REGISTRY: dict[str, type[Representation]] = {
    OutputFormat.ELAPSED: ElapsedRepresentation,
    OutputFormat.ISO8601: ISO8601Representation,
    OutputFormat.FIELD_MAP: FieldMapRepresentation,
    OutputFormat.TOTAL_SECONDS: TotalSecondsRepresentation,
}

_BY_LOWER_NAME: dict[str, type[Representation]] = {
    str(name).lower(): cls for name, cls in _REGISTRY.items()
}


def get_representation(name: str) -> Representation:
    """Get a representation instance by output format name.

    Args:
        name: An OutputFormat member or its name ("Elapsed", "ISO8601",
            "FieldMap", "TotalSeconds"). Matching ignores case.

    Returns:
        A Representation instance.

    Raises:
        ValueError: If the output format name is unknown.
    """
    cls = _BY_LOWER_NAME.get(str(name).lower())
    if cls is None:
        raise ValueError(
            f"unknown output format: {name!r}. "
            f"Available: {', '.join(sorted(_REGISTRY))}"
        )
    return cls()
