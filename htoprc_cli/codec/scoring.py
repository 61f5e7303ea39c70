"""Version detection and customization scoring for parsed configs."""

from __future__ import annotations

from htoprc_cli.config.defaults import DEFAULT_CONFIG, STOCK_LEFT_METERS, STOCK_RIGHT_METERS
from htoprc_cli.config.model import HtopConfig, Meter

__all__ = ["SCORE_WEIGHTS", "detect_version", "compute_score"]

SCORE_WEIGHTS = {
    "color_scheme": 10,
    "tree_view": 5,
    "left_meters": 5,
    "right_meters": 5,
    "header_layout": 3,
}


def detect_version(config: HtopConfig) -> str:
    """Return "v3", "v2" or "unknown" based on config_reader_min_version.

    htop 2.x files usually carry no config_reader_min_version at all, so
    they are reported as "unknown" rather than guessed.
    """
    if config.config_reader_min_version is None:
        return "unknown"
    if config.config_reader_min_version >= 3:
        return "v3"
    return "v2"


def _meters_customized(meters: list[Meter], stock: tuple[Meter, ...]) -> bool:
    return bool(meters) and tuple(meters) != stock


def compute_score(config: HtopConfig) -> int:
    """Score how much a config deviates from a stock htop setup."""
    score = 0
    if config.color_scheme != DEFAULT_CONFIG.color_scheme:
        score += SCORE_WEIGHTS["color_scheme"]
    if config.tree_view:
        score += SCORE_WEIGHTS["tree_view"]
    if _meters_customized(config.left_meters, STOCK_LEFT_METERS):
        score += SCORE_WEIGHTS["left_meters"]
    if _meters_customized(config.right_meters, STOCK_RIGHT_METERS):
        score += SCORE_WEIGHTS["right_meters"]
    if config.header_layout != DEFAULT_CONFIG.header_layout:
        score += SCORE_WEIGHTS["header_layout"]
    return score
