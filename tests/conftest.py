from dispatchkit.testing.fixtures import listener_factory  # noqa: F401
