"""Static registry of known VS Code-family editors and their commands.

Each EditorProfile lists the command names an editor installs on PATH, in
the order they should be probed. Order across profiles is discovery
priority: when several editors are installed, earlier profiles win.
"""

from codeopen.domain.entities import EditorProfile

BUILTIN_PROFILES: dict[str, EditorProfile] = {
    "cursor": EditorProfile(
        name="Cursor",
        short_name="cursor",
        candidates=("cursor",),
    ),
    "vscodium": EditorProfile(
        name="VSCodium",
        short_name="vscodium",
        candidates=("codium", "vscodium"),
    ),
    # Void ships its own launcher but most setups alias it to `code`
    "void": EditorProfile(
        name="Void Editor",
        short_name="void",
        candidates=("voideditor", "code"),
    ),
}


def resolve_profiles(
    short_names: list[str],
    custom: dict[str, EditorProfile] | None = None,
) -> list[EditorProfile]:
    """Resolve an ordered list of provider names to profiles.

    Custom profiles override built-ins with the same short name. Custom
    profiles not named in short_names are appended after the listed ones.

    Args:
        short_names: Provider short names in priority order.
        custom: User-defined profiles keyed by short name.

    Returns:
        Ordered list of profiles.

    Raises:
        ValueError: If a name is neither built-in nor custom.
    """
    custom = custom or {}
    available = {**BUILTIN_PROFILES, **custom}

    profiles: list[EditorProfile] = []
    for short_name in short_names:
        if short_name not in available:
            known = ", ".join(sorted(available))
            raise ValueError(f"Unknown editor provider '{short_name}' (known: {known})")
        profiles.append(available[short_name])

    for short_name, profile in custom.items():
        if short_name not in short_names:
            profiles.append(profile)

    return profiles
