from boosterforge.testing.fixtures import catalog, memory_app  # noqa: F401
