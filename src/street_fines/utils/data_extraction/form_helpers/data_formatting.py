import re
import pandas as pd

from street_fines.utils.logging_setup import logger


def format_column_name(name: str) -> str:
    """
    Normalizes a CSV header so the settings can name columns one way:
    'Set Fine Amount' -> 'set_fine_amount', ' Location2 ' -> 'location2'.

    Raises :
    - ValueError: If the provided name is not a non-empty string.
    """
    if not isinstance(name, str) or not name:
        logger.error(f"Invalid column name: {name}")
        raise ValueError("Column name must be a non-empty string")

    # Replace spaces and remove special characters
    name = name.strip().replace(" ", "_")
    name = re.sub(r"[^A-Za-z0-9_]+", "", name)

    return name.lower()


def totals_to_frame(totals: pd.Series) -> pd.DataFrame:
    """
    Turns a street -> total fines Series into a two column ('street', 'total_fines')
    DataFrame, keeping the Series order.
    """
    if not isinstance(totals, pd.Series):
        logger.error("Provided object is not a Pandas Series.")
        raise ValueError("Street totals must be a Pandas Series.")

    frame = totals.rename("total_fines").rename_axis("street").reset_index()
    return frame
