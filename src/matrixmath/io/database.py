"""
SQL Table <-> Matrix
====================
Loads a Matrix from a relational table and stores a Matrix as one.

Invariants:
    - Every call opens its own connection from the caller's Engine and
      closes it before returning; disposing the Engine is the caller's job.
    - load_matrix() never raises for a failed query: it logs and returns None.
    - store_matrix() writes all rows in one transaction or none of them.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy import Column, Float, Integer, MetaData, Table, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from matrixmath import config
from matrixmath.errors import DimensionMismatch
from matrixmath.model.matrix import Matrix

logger = logging.getLogger(__name__)


def create_engine_from_config(url: Optional[str] = None, **kwargs) -> Engine:
    """
    Create an SQLAlchemy Engine for the matrix database.

    Args:
        url: Database URL. Defaults to `config.get_database_url()`.
        **kwargs: Passed through to `sqlalchemy.create_engine`.
    """
    url = url or config.get_database_url()
    logger.info(f"Creating database engine for: {url}")
    return create_engine(url, **kwargs)


def load_matrix(
    engine: Engine,
    table_name: str,
    columns: Optional[Sequence[str]] = None,
) -> Optional[Matrix]:
    """
    Return a Matrix built from the rows of SQL table `table_name`.

    Args:
        engine: Engine connected to the source database.
        table_name: Name of the SQL table.
        columns: Column names to select, in order. All columns when omitted.

    Returns:
        The new Matrix, one matrix row per result row, or None if the query
        failed or returned no rows.
    """
    try:
        with engine.connect() as conn:
            table = Table(table_name, MetaData(), autoload_with=conn)
            if columns:
                query = select(*[table.c[name] for name in columns])
            else:
                query = select(table)
            logger.debug(f"Executing: {query}")
            rows = [list(row) for row in conn.execute(query)]
    except (SQLAlchemyError, KeyError) as e:
        logger.error(f"Failed to load matrix from table '{table_name}': {e}")
        return None

    if not rows:
        logger.warning(f"Table '{table_name}' is empty; no matrix loaded.")
        return None

    logger.info(f"Loaded {len(rows)}x{len(rows[0])} matrix from table '{table_name}'.")
    return Matrix(rows)


def store_matrix(
    engine: Engine,
    table_name: str,
    matrix: Matrix,
    columns: Optional[Sequence[str]] = None,
) -> None:
    """
    Create SQL table `table_name` and insert the rows of `matrix` into it.

    Args:
        engine: Engine connected to the target database.
        table_name: Name of the new table.
        matrix: The Matrix to store.
        columns: Column names, one per matrix column. Defaults to c1..cn.

    Raises:
        DimensionMismatch: If the number of column names differs from the
            number of matrix columns.
        sqlalchemy.exc.SQLAlchemyError: If the table cannot be created or filled.
    """
    n_cols = matrix.num_columns()
    if columns is None:
        columns = [f"c{j}" for j in range(1, n_cols + 1)]
    if len(columns) != n_cols:
        raise DimensionMismatch(f"Expected {n_cols} column names, got {len(columns)}.")

    # Integer cells are stored in object arrays as exact Python ints.
    column_type = Integer if matrix.to_array().dtype == object else Float
    metadata = MetaData()
    table = Table(table_name, metadata, *[Column(name, column_type) for name in columns])

    rows = [dict(zip(columns, row)) for row in matrix.to_list()]
    with engine.begin() as conn:
        metadata.create_all(conn)
        conn.execute(table.insert(), rows)

    logger.info(f"Stored {matrix.num_rows()}x{n_cols} matrix in table '{table_name}'.")
