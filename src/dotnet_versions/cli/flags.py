"""Recognition of the DOS-style flags accepted as the first argument.

A flag may be written with any of the prefixes "/", "-" or "--" and in any
case: "/b", "-B" and "--b" all mean batch mode.
"""

FLAG_PREFIXES = ("/", "-", "--")
BATCH_FLAG = "b"
HELP_FLAGS = ("help", "?")


def has_parameter(argument: str, name: str) -> bool:
    """Check whether argument spells the flag name with a known prefix."""
    argument = argument.lower()
    name = name.lower()
    return any(argument == f"{prefix}{name}" for prefix in FLAG_PREFIXES)


def is_help_command(args: list[str]) -> bool:
    """True when the first argument asks for usage text."""
    return len(args) > 0 and any(has_parameter(args[0], flag) for flag in HELP_FLAGS)


def is_batch_mode(args: list[str]) -> bool:
    """True when the first argument requests batch mode."""
    return len(args) > 0 and has_parameter(args[0], BATCH_FLAG)
