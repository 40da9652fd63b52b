from dataclasses import dataclass
from typing import Optional


@dataclass
class ResolverConfig:
    # Sources
    catalog_path: Optional[str] = None
    template_dir: Optional[str] = None

    # Fuzzy matching
    enable_fuzzy_matching: bool = True
    fuzzy_threshold: float = 0.75
    fuzzy_scorer: str = "ratio"

    # Tier weights (0.0 = exact tier)
    exact_weight: float = 0.0
    fuzzy_weight: float = 1.0
    template_weight: float = 0.0

    # Logging
    log_level: str = "INFO"
