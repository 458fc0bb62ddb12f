from dataclasses import dataclass

__all__ = ("Asset",)


@dataclass(frozen=True)
class Asset:
    """Placeholder for a binary asset that was _not_ loaded during the
    parsing of a compiled show file.
    """

    filename: str
    """Name of the asset within the compiled show file."""
