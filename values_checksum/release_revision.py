"""Accessor for the revision of a release."""

from values_checksum.release import Release


def release_revision(rel: Release | None) -> int:
    """Return the version of the release, or 0 if there is none."""
    if rel is None:
        return 0
    return rel.version
