from typing import Dict, Set

GENERATED_KEYS = {"id", "timestamp"}


def exclude_keys(data: Dict, keys: Set[str] = GENERATED_KEYS) -> Dict:
    return {k: v for k, v in data.items() if k not in keys}
