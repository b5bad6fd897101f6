"""Insight Extractor: pulls labelled numbers out of free-form answer text.

Best effort and English-centric. Matches currency (``$2.5M``), percentages
(``45%``), magnitude suffixes (``K``/``M``/``B``) and comma-grouped integers
(``1,234``), and labels each one with the words right before it.
"""

import logging
import re
from typing import List

from ..schemas.query import DataPoint

logger = logging.getLogger(__name__)

NUMBER_RE = re.compile(
    r"(?<![A-Za-z0-9_.,])"
    r"\$?"
    r"(?P<number>\d{1,3}(?:,\d{3})+|\d+)"
    r"(?P<fraction>\.\d+)?"
    r"(?P<suffix>[KMB%])?"
    r"(?![A-Za-z0-9%]|[.,]\d)"
)
LABEL_RE = re.compile(r"([A-Za-z\s]+):?\s*$")

LABEL_WINDOW = 50
MULTIPLIERS = {"K": 1e3, "M": 1e6, "B": 1e9}


def parse_value(number: str, fraction: str | None, suffix: str | None) -> float:
    value = float(number.replace(",", "") + (fraction or ""))
    return value * MULTIPLIERS.get(suffix or "", 1)


def label_before(text: str, start: int) -> str:
    preceding = text[max(0, start - LABEL_WINDOW):start]
    m = LABEL_RE.search(preceding)
    return m.group(1).strip() if m else ""


def extract_data_points(text: str) -> List[DataPoint]:
    points: List[DataPoint] = []
    src = str(text or "")
    for m in NUMBER_RE.finditer(src):
        value = parse_value(m.group("number"), m.group("fraction"), m.group("suffix"))
        label = label_before(src, m.start()) or f"Metric {len(points) + 1}"
        points.append(DataPoint(label=label, value=value))
    logger.debug("Extracted %d data points", len(points))
    return points
