from collections.abc import Mapping

from loadwatch.domains.metric import Dimension


def build_dimensions(dimensions: Mapping[str, str] | None) -> tuple[Dimension, ...]:
    """Convert a name -> value mapping into dimensions, keeping the mapping order."""
    if dimensions is None:
        return ()
    return tuple(Dimension(name=name, value=value) for name, value in dimensions.items())
