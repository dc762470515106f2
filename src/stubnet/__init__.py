"""stubnet package."""

__all__ = [
    "install",
    "installed_components",
    "is_installed",
    "normalize_target",
    "substitute",
]


def __getattr__(name: str):
    if name in ("install", "installed_components", "is_installed"):
        from stubnet import installer

        return getattr(installer, name)
    if name == "normalize_target":
        from stubnet.network import normalize_target

        return normalize_target
    if name == "substitute":
        from stubnet.substitution import substitute

        return substitute
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(__all__)
