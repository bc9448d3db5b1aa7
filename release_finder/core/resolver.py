"""Selection of the latest copy of every file."""

from operator import attrgetter

from .result_types import FileRecord


def resolve_latest(grouped: dict[str, list[FileRecord]]) -> dict[str, FileRecord]:
    """Pick the most recently modified record for every name.

    Records are stably sorted by mod_time and the last one is taken, so on
    equal timestamps the record that came later in the input wins.

    Args:
        grouped: Records per entry name, in discovery order

    Returns:
        Mapping of entry name to its latest record
    """
    latest = {}

    for name, versions in grouped.items():
        if not versions:
            continue
        latest[name] = sorted(versions, key=attrgetter('mod_time'))[-1]

    return latest
