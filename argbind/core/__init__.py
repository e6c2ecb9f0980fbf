from .binder import bind_arguments, check_arity
from .context import CommandContext
from .prefix import find_prefix, has_mention_prefix, has_string_prefix
from .tokenizer import split_arguments

__all__ = [
    "CommandContext",
    "bind_arguments",
    "check_arity",
    "find_prefix",
    "has_mention_prefix",
    "has_string_prefix",
    "split_arguments",
]
