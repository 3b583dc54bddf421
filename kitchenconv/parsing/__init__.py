from .arguments import parse_arguments, has_enough_tokens
from .quantity import parse_quantity

__all__ = ["parse_arguments", "has_enough_tokens", "parse_quantity"]
