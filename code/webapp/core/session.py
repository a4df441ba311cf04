import logging
from typing import Any, List, Mapping, Optional, Tuple

from household import codec
from household.config import SHARE_BASE_URL
from household.schemas import DEFAULT_SCENARIO, DataPoint, ScenarioParameters
from household.sweep import sweep
from household.utils import format_percent

logger = logging.getLogger(__name__)


def build_notes(params: ScenarioParameters) -> List[str]:
    return [
        f"All calculations assume a {format_percent(params.tax_rate)} effective tax rate",
        "Take home pay is calculated after taxes, savings, and all specified expenses",
        "Share your scenario using the button above to save and share your custom parameters",
    ]


def slider_start(value: float, bounds: Tuple[float, float, float]) -> int:
    lo, hi, _step = bounds
    return int(min(max(value, lo), hi))


def slider_result(value: float, bounds: Tuple[float, float, float], picked: float) -> float:
    """Keep `value` unless the widget was moved off its clamped starting position."""
    if picked == slider_start(value, bounds):
        return value
    return picked


class ScenarioSession:
    """Scenario state for one page session.

    The share token (if any) is passed in explicitly; a missing or bad token
    falls back to the default scenario. Chart data is recomputed only when the
    parameters change.
    """

    def __init__(self, token: Optional[str] = None):
        decoded = codec.decode(token) if token else None
        if token and decoded is None:
            logger.info("ignoring malformed share token, using defaults")
        self.source = "shared" if decoded is not None else "default"
        self._params = decoded or DEFAULT_SCENARIO
        self._points: Optional[List[DataPoint]] = None
        self._points_for: Optional[ScenarioParameters] = None

    @classmethod
    def from_query(cls, query: Mapping[str, Any]) -> "ScenarioSession":
        return cls(codec.token_from_query(query))

    @property
    def params(self) -> ScenarioParameters:
        return self._params

    def update(self, **changes: Any) -> ScenarioParameters:
        self._params = self._params.replace(**changes)
        return self._params

    @property
    def chart_data(self) -> List[DataPoint]:
        if self._points is None or self._points_for != self._params:
            self._points = sweep(self._params)
            self._points_for = self._params
        return self._points

    def share_token(self) -> str:
        return codec.encode(self._params)

    def share_url(self, base_url: Optional[str] = None) -> str:
        return codec.build_share_url(self._params, base_url or SHARE_BASE_URL)

    def notes(self) -> List[str]:
        return build_notes(self._params)
