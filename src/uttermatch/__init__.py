__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy re-exports from uttermatch.api for convenience."""
    _api_names = {
        "InteractionModel",
        "ModelBuilder",
        "Resolution",
        "build_model",
        "load_interaction_model",
        "resolve",
        "resolve_all",
    }
    if name in _api_names:
        from uttermatch import api

        return getattr(api, name)
    raise AttributeError(f"module 'uttermatch' has no attribute {name!r}")
