"""Exception types raised by the gene report pipeline."""

from __future__ import annotations


class GeneReportError(Exception):
    """Base class for all gene report errors."""


class InvalidGeneSymbolError(GeneReportError, ValueError):
    """The gene symbol is empty or contains non-word characters."""

    def __init__(self, symbol: str) -> None:
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return (
            f"Invalid gene symbol {self.symbol!r}. "
            "Please provide a valid gene name (example: ABCG2)."
        )


class StoreConnectionError(GeneReportError):
    """The record store could not be opened."""


class EmptyJoinError(GeneReportError):
    """The joined read returned no rows after all partial records were written."""

    def __init__(self, symbol: str) -> None:
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"No joined record found for {self.symbol} after storing all sources"


class SourceDataError(GeneReportError):
    """A remote payload was malformed or lacked the expected fields."""
