import pandas as pd


def rows_to_frame(rows):
    """Build a DataFrame from mapping-style rows, keeping column order.

    Columns stay ``object`` typed so whole numbers are not widened to floats
    by a NULL elsewhere in the column, and NULLs become empty cells.
    """
    records = [{key: "" if value is None else value for key, value in dict(row).items()} for row in rows]
    return pd.DataFrame(records, dtype=object)


def print_table(rows):
    """Print query results as a console table"""
    if not rows:
        print("No records found.")
        return

    frame = rows_to_frame(rows)
    print("\n" + frame.to_string(index=False))
