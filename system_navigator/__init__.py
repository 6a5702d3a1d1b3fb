"""system_navigator package: interactive filesystem shell rooted at the user's home.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
