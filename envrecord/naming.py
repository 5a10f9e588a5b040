# SPDX-License-Identifier: MIT
# Copyright (c) 2025 envrecord contributors

"""Environment variable name derivation."""


def snake_case(identifier: str) -> str:
    """Convert a CapitalizedWords identifier to snake_case.

    A ``_`` is inserted before an uppercase character that starts a new word,
    i.e. one followed by a lowercase character or preceded by one. Runs of
    uppercase letters (acronyms) stay together as a single word.

    Example:
        >>> snake_case("APIKey")
        'api_key'
        >>> snake_case("AutoRestart")
        'auto_restart'
    """
    length = len(identifier)
    out = []
    for i, char in enumerate(identifier):
        if (
            i > 0
            and char.isupper()
            and ((i + 1 < length and identifier[i + 1].islower()) or identifier[i - 1].islower())
            and identifier[i - 1] != "_"
        ):
            out.append("_")
        out.append(char.lower())
    return "".join(out)


def resolve_env_name(field_name: str, prefix: str = "") -> str:
    """Return the environment variable key for a record field.

    Args:
        field_name: Declared field identifier
        prefix: Optional prefix, joined to the derived name with ``_``

    Returns:
        Upper-cased variable name, e.g. ``PREF_API_KEY``
    """
    env_name = snake_case(field_name)
    if prefix:
        env_name = f"{prefix}_{env_name}"
    return env_name.upper()
