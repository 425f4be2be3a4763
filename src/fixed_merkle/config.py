# config.py
# Environment-driven settings. Values come from the process environment,
# with a local .env file filling in anything unset.

import os

from dotenv import load_dotenv

from fixed_merkle.models import TreeConfig


def load_config() -> TreeConfig:
    """
    Build a TreeConfig from MERKLE_* environment variables.

    Unset variables fall back to the model defaults. Invalid values raise
    pydantic.ValidationError.
    """
    load_dotenv()

    values: dict[str, str] = {}
    for field, var in (
        ("levels", "MERKLE_LEVELS"),
        ("combiner", "MERKLE_COMBINER"),
        ("log_level", "MERKLE_LOG_LEVEL"),
    ):
        raw = os.getenv(var)
        if raw is not None and raw.strip():
            values[field] = raw.strip().upper() if field == "log_level" else raw.strip()

    return TreeConfig.model_validate(values)
