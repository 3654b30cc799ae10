"""Map raw modem RSSI readings to dBm by linear interpolation."""

import bisect
import logging
import re
from typing import Dict, List

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class RssiInterpolator:
    """A table of raw-value to RSSI points."""

    def __init__(self) -> None:
        self._points: Dict[int, int] = {}
        self._keys: List[int] = []

    def __len__(self) -> int:
        return len(self._keys)

    def load(self, filename) -> bool:
        """Add points from a file of ``raw rssi`` lines; '#' starts a comment line.

        Returns whether the table now holds any points. Raises OSError if the
        file cannot be read.
        """
        try:
            with open(filename, "rt") as fp:
                lines = fp.readlines()
        except OSError:
            logger.warning("Cannot open the RSSI data file - %s", filename)
            raise

        for line in lines:
            if line.startswith("#"):
                continue
            tokens = line.split()
            if len(tokens) < 2:
                continue
            raw = _atoi(tokens[0]) & 0xFFFF
            if raw not in self._points:
                self._points[raw] = _atoi(tokens[1])
                bisect.insort(self._keys, raw)

        logger.info("Loaded %u RSSI data mapping points from %s", len(self._keys), filename)
        return bool(self._keys)

    def interpolate(self, raw: int) -> int:
        """RSSI for a raw reading; clamps outside the table, 0 if it is empty."""
        if not self._keys:
            return 0
        index = bisect.bisect_left(self._keys, raw)
        if index == len(self._keys):
            return self._points[self._keys[-1]]
        if index == 0:
            return self._points[self._keys[0]]
        x2 = self._keys[index]
        x1 = self._keys[index - 1]
        y2 = self._points[x2]
        y1 = self._points[x1]
        p = (raw - x1) / (x2 - x1)
        return int((1.0 - p) * y1 + p * y2)