from collections.abc import Iterable


def split_symbols(text: str) -> tuple[str, ...]:
    """Split table text into its symbols, one per code point."""
    return tuple(text)


def is_single_code_point(symbols: Iterable[str]) -> bool:
    """Check whether every symbol is exactly one code point long."""
    return all(len(symbol) == 1 for symbol in symbols)
