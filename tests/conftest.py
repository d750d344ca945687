from orderedmap.testing import odict_factory, strict_invariants  # noqa: F401
