# Makes the repository root importable so tests can share ``tests.factories``.
