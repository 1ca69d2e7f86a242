# hr_insights/dataset/loader.py

import logging
import os
from typing import Optional

import pandas as pd
from sqlalchemy import MetaData, Table, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from db.db_utils import get_engine
from db.models import EmployeeData
from hr_insights import config
from hr_insights.common.exceptions import DataSourceError
from hr_insights.dataset.snapshot import EmployeeDataset
from hr_insights.dataset.validator import build_dataset

logger = logging.getLogger(__name__)


# FILE SOURCE

def read_csv(file_path: str, sep: str = ",") -> pd.DataFrame:
    """
    Read an EmployeeData CSV export as raw strings.

    Raises:
        DataSourceError: If the file is missing or cannot be parsed
    """
    file_name = os.path.basename(file_path)
    logger.info(f"Reading file: {file_name}")

    try:
        # All columns as strings; typing happens during validation
        df = pd.read_csv(
            file_path,
            sep=sep,
            dtype=str,
            keep_default_na=False,
            quotechar='"'
        )
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        logger.error(f"Failed to read {file_name}: {e}")
        raise DataSourceError("Cannot read employee CSV", source=file_path, original_error=e) from e

    logger.info(f"  {len(df)} rows, {len(df.columns)} columns read from {file_name}")
    return df


def load_csv(
    file_path: str,
    on_invalid: Optional[str] = None,
    sep: str = ","
) -> EmployeeDataset:
    """
    Load and validate an EmployeeData CSV export.

    Args:
        file_path: Path to the CSV file
        on_invalid: "skip" or "abort" (default from config)
        sep: Field separator

    Returns:
        Validated EmployeeDataset
    """
    raw_df = read_csv(file_path, sep=sep)
    return build_dataset(raw_df, source=file_path, on_invalid=on_invalid)


# DATABASE SOURCE

def _source_table(engine: Engine, table_name: Optional[str], schema: Optional[str]) -> Table:
    table_name = table_name or config.EMPLOYEE_TABLE
    schema = schema if schema is not None else config.EMPLOYEE_SCHEMA

    model_table = EmployeeData.__table__
    if table_name == model_table.name and schema == model_table.schema:
        return model_table
    # Same columns under a different name or schema (e.g. Hr.dbo.EmployeeData)
    return Table(table_name, MetaData(schema=schema), autoload_with=engine)


def read_table(
    engine: Optional[Engine] = None,
    table_name: Optional[str] = None,
    schema: Optional[str] = None
) -> pd.DataFrame:
    """
    Read the whole employee table into a DataFrame.

    Raises:
        DataSourceError: If the database cannot be queried
    """
    if engine is None:
        engine = get_engine()

    try:
        table = _source_table(engine, table_name, schema)
        df = pd.read_sql(select(table), engine)
    except SQLAlchemyError as e:
        logger.error(f"Failed to query employee table: {e}")
        raise DataSourceError(
            "Cannot read employee table",
            source=table_name or config.EMPLOYEE_TABLE,
            original_error=e
        ) from e

    logger.info(f"Loaded {len(df)} employees from {table.fullname}")
    return df


def load_table(
    engine: Optional[Engine] = None,
    table_name: Optional[str] = None,
    schema: Optional[str] = None,
    on_invalid: Optional[str] = None
) -> EmployeeDataset:
    """
    Load and validate the employee table.

    Args:
        engine: SQLAlchemy engine (created from config if not provided)
        table_name: Table to read (default: config.EMPLOYEE_TABLE)
        schema: Optional schema of the table
        on_invalid: "skip" or "abort" (default from config)

    Returns:
        Validated EmployeeDataset
    """
    raw_df = read_table(engine, table_name, schema)
    source = table_name or config.EMPLOYEE_TABLE
    return build_dataset(raw_df, source=source, on_invalid=on_invalid)


def load_dataset(
    csv_path: Optional[str] = None,
    on_invalid: Optional[str] = None
) -> EmployeeDataset:
    """
    Load a snapshot from the configured source: a CSV export when one is given
    (argument or EMPLOYEE_CSV), otherwise the database table.
    """
    csv_path = csv_path or config.EMPLOYEE_CSV
    if csv_path:
        return load_csv(csv_path, on_invalid=on_invalid)
    return load_table(on_invalid=on_invalid)
