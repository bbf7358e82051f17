# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""Reading comma-separated files, spreadsheets and SQLite databases."""

import os
import sqlite3
import tempfile
from contextlib import closing

from ..datasets import get_data_path, list_datasets, read_data
from ._registry import register


@register(
    "data_import",
    "Importing data",
    tags=("data",),
    requires=("pandas", "openpyxl"),
)
def build(doc, seed):
    """
    Load the same table from a comma-separated file, an Excel workbook and
    an embedded SQLite database, and check that the three copies agree.
    """
    doc.heading("Bundled samples")
    doc.text(
        "The package ships small sample files at a fixed location. "
        f"The available samples are: {', '.join(list_datasets())}.")

    path = get_data_path("mtcars")
    cars = read_data(path)
    doc.code('cars = read_data(get_data_path("mtcars"))')
    doc.output(cars.head())
    doc.text(
        f"The comma-separated file holds {cars.shape[0]} cars described by "
        f"{cars.shape[1]} columns: the model name plus "
        f"{cars.shape[1] - 1} numeric road-test measurements.")
    doc.output(cars.dtypes.to_frame("dtype"))

    with tempfile.TemporaryDirectory() as tmp:
        doc.heading("Spreadsheets")
        xlsx = os.path.join(tmp, "mtcars.xlsx")
        cars.to_excel(xlsx, sheet_name="cars", index=False)
        from_excel = read_data(xlsx, sheet_name="cars")
        doc.code(
            """
            cars.to_excel("mtcars.xlsx", sheet_name="cars", index=False)
            from_excel = read_data("mtcars.xlsx", sheet_name="cars")
            """)
        same_excel = from_excel.equals(cars)
        doc.text(
            "Spreadsheets are read sheet by sheet. The workbook written from "
            "the frame reads back "
            + ("identically." if same_excel else "with differences."))

        doc.heading("Embedded databases")
        db = os.path.join(tmp, "cars.sqlite")
        with closing(sqlite3.connect(db)) as conn:
            cars.to_sql("mtcars", conn, index=False)
            conn.commit()
        from_sql = read_data(db, table="mtcars")
        heavy = read_data(
            db, table="SELECT model, mpg, wt FROM mtcars WHERE wt > 4 "
                      "ORDER BY wt DESC")
        doc.code(
            """
            from_sql = read_data("cars.sqlite", table="mtcars")
            heavy = read_data("cars.sqlite",
                              table="SELECT model, mpg, wt FROM mtcars "
                                    "WHERE wt > 4 ORDER BY wt DESC")
            """)
        doc.output(heavy)
        same_sql = from_sql.equals(cars)
        doc.text(
            "A database file needs a table name or a full query. Filtering in "
            f"SQL keeps only the {len(heavy)} cars heavier than 4000 lbs; the "
            "full table reads back "
            + ("identically." if same_sql else "with differences."))

    doc.record("n_rows", cars.shape[0])
    doc.record("n_columns", cars.shape[1])
    doc.record("excel_roundtrip", bool(same_excel))
    doc.record("sqlite_roundtrip", bool(same_sql))
    doc.record("n_heavy", len(heavy))
