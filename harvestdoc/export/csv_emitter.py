"""
CSV emitter - streams concept catalogs as one row per field.

Polars-based rendering:
- write_csv(separator=',', quote_style='necessary', line_terminator='\n')
- All columns Utf8, empty cells unquoted, header "Field,Concept,Category,Description"
- Header written once per encoder, never repeated across encode() calls
- Rows keep input order: concepts in sequence order, fields in declaration order

Output is append-only. A failed write leaves earlier rows in the sink.
"""
import logging
from typing import Iterable, Iterator, List, TextIO

import polars as pl

from harvestdoc.core.errors import WriteError
from harvestdoc.schemas.concept import Concept

logger = logging.getLogger(__name__)

HEADER = ["Field", "Concept", "Category", "Description"]

SCHEMA = {column: pl.Utf8 for column in HEADER}


def flatten(concepts: Iterable[Concept]) -> Iterator[List[str]]:
    """
    Expand each concept into one row per field.

    A concept without a category gets an empty Category cell.
    """
    for concept in concepts:
        if concept.category is not None:
            category_name = concept.category.name
        else:
            category_name = ""
            if concept.fields:
                logger.warning(
                    f"Concept {concept.id} ({concept.name!r}) has no category; "
                    f"writing {len(concept.fields)} rows with an empty Category"
                )

        for field in concept.fields:
            yield [
                field.name,
                concept.name,
                category_name,
                field.description.strip(),
            ]


def _render(rows: List[List[str]], include_header: bool) -> str:
    # Empty cells go out as nulls so polars writes them bare instead of ""
    df = pl.DataFrame(rows, schema=SCHEMA, orient="row").with_columns(
        [
            pl.when(pl.col(column) == "").then(None).otherwise(pl.col(column)).alias(column)
            for column in HEADER
        ]
    )
    return df.write_csv(
        include_header=include_header,
        separator=",",
        quote_style="necessary",
        null_value="",
        line_terminator="\n",
    )


class CSVEncoder:
    """
    Encodes concept batches into a text sink.

    The same encoder may be fed several batches; only the first call emits
    the header.
    """

    def __init__(self, sink: TextIO):
        self.sink = sink
        self.started = False

    def encode(self, concepts: Iterable[Concept]) -> int:
        """
        Write one CSV row per field and flush the sink.

        Args:
            concepts: Concepts in export order

        Returns:
            Number of data rows written

        Raises:
            WriteError: If the sink rejects a write or flush
        """
        if not self.started:
            self._write(_render([], include_header=True))
            self.started = True

        rows = list(flatten(concepts))
        if rows:
            self._write(_render(rows, include_header=False))

        try:
            self.sink.flush()
        except (OSError, ValueError) as e:
            raise WriteError(f"csv: flush failed: {e}") from e

        logger.debug(f"Encoded {len(rows)} rows")
        return len(rows)

    def _write(self, text: str) -> None:
        try:
            self.sink.write(text)
        except (OSError, ValueError) as e:
            raise WriteError(f"csv: write failed: {e}") from e
