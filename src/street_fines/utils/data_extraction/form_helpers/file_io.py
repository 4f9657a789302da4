from pathlib import Path
from typing import Union
import pandas as pd

from street_fines.utils.logging_setup import logger


def save_to_csv(
    df: pd.DataFrame,
    file_path: Union[str, Path],
    index: bool = False,
) -> bool:
    """
    Writes a street totals DataFrame to CSV, replacing any previous run's file.

    Args:
        df (pd.DataFrame): The totals to write, e.g. from `totals_to_frame`.
        file_path (Union[str, Path]): Destination; missing parent folders are created.
        index (bool): Whether to write the DataFrame index. Default is False.

    Returns:
        bool: True once the file is written.

    Raises:
        ValueError: If the input is not a DataFrame or the path isn't a str/Path.
        OSError: If the file can't be written.
    """
    if not isinstance(df, pd.DataFrame):
        logger.error("Provided object is not a Pandas DataFrame.")
        raise ValueError("The input data must be a Pandas DataFrame.")

    if not isinstance(file_path, (str, Path)):
        raise ValueError("The file path must be a string or Path object.")

    file_path = Path(file_path)

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(file_path, index=index)
    except OSError as e:
        logger.error(f"Error saving street totals to {file_path}: {e}")
        raise

    logger.info(f"Saved totals for {df.shape[0]} streets to {file_path}")
    return True


def get_file_path(base_dir: str, data_type: str, filename: str) -> Path:
    """
    Default output location: base directory / storage folder (e.g. 'data/processed/')
    / file name, as configured under `data_storage` in settings.yaml.
    """
    return Path(base_dir) / data_type / filename
