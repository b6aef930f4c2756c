"""Sensor frame settings loaded from JSON.

A settings file declares the frame every sensor reports in and the common
reference frame readings should be converted to:

    {
      "reference_frame": "NorthEastDown",
      "sensors": {
        "imu_wrist": {"frame": "EastNorthUp"},
        "imu_elbow": {"frame": 9}
      }
    }

Frames may be given as CamelCase names, FrameType member names or integer
discriminants. The reference frame defaults to North-East-Down.
"""

import json
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import numpy as np

from .conversion import remap_array
from .coordinate import Coordinate
from .frames import FrameType, descriptor_for
from .registry import coordinate_type

_TOP_LEVEL_KEYS = {"reference_frame", "sensors"}
_SENSOR_KEYS = {"frame", "description"}


@dataclass(frozen=True)
class SensorFrameConfig:
    """Frame a single sensor reports its vectors in.

    Attributes:
        name: Sensor identifier.
        frame_type: Frame of the sensor's raw readings.
        description: Optional free-form note (mounting, part number, ...).
    """

    name: str
    frame_type: FrameType
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "frame_type", FrameType.parse(self.frame_type))
        # Rejects OTHER and anything else without an axis-aligned descriptor.
        descriptor_for(self.frame_type)


@dataclass(frozen=True)
class FrameSettings:
    """Reference frame plus per-sensor frames."""

    reference_frame: FrameType = FrameType.NORTH_EAST_DOWN
    sensors: Dict[str, SensorFrameConfig] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "reference_frame", FrameType.parse(self.reference_frame)
        )
        descriptor_for(self.reference_frame)

    def sensor(self, name: str) -> SensorFrameConfig:
        """Settings for one sensor.

        Raises:
            KeyError: If the sensor is not configured.
        """
        try:
            return self.sensors[name]
        except KeyError:
            raise KeyError(f"Sensor {name!r} not found in frame settings") from None

    def to_reference(self, name: str, values: Any) -> Coordinate:
        """Convert one raw reading of a sensor into the reference frame.

        Args:
            name: Sensor identifier.
            values: Three components in the sensor's storage order.

        Returns:
            Coordinate value in the reference frame.
        """
        reading = coordinate_type(self.sensor(name).frame_type).from_slice(values)
        return reading.convert_to(self.reference_frame)

    def remap(self, name: str, data: Any) -> np.ndarray:
        """Convert a (3,) or (N, 3) array of sensor readings to the reference frame."""
        return remap_array(data, self.sensor(name).frame_type, self.reference_frame)


def parse_frame_settings(raw: Dict[str, Any]) -> FrameSettings:
    """
    Build FrameSettings from an already decoded mapping.

    Raises:
        ValueError: If the structure is malformed.
        UnsupportedFrameError: If a frame tag is unknown.
    """
    if not isinstance(raw, dict):
        raise ValueError("frame settings must be a JSON object")

    unknown = set(raw) - _TOP_LEVEL_KEYS
    if unknown:
        warnings.warn(
            f"Ignoring unknown frame settings keys: {sorted(unknown)}",
            UserWarning,
        )

    reference_frame = FrameType.parse(raw.get("reference_frame", FrameType.default()))

    raw_sensors = raw.get("sensors", {}) or {}
    if not isinstance(raw_sensors, dict):
        raise ValueError("frame settings: sensors block must be an object")

    sensors: Dict[str, SensorFrameConfig] = {}
    for name, entry in raw_sensors.items():
        # Shorthand: "imu_wrist": "EastNorthUp"
        if not isinstance(entry, dict):
            entry = {"frame": entry}
        if "frame" not in entry:
            raise ValueError(f"frame settings: sensor {name!r} has no 'frame'")
        extra = set(entry) - _SENSOR_KEYS
        if extra:
            warnings.warn(
                f"Ignoring unknown keys for sensor {name!r}: {sorted(extra)}",
                UserWarning,
            )
        sensors[str(name)] = SensorFrameConfig(
            name=str(name),
            frame_type=FrameType.parse(entry["frame"]),
            description=str(entry.get("description", "")),
        )

    return FrameSettings(reference_frame=reference_frame, sensors=sensors)


def load_frame_settings(path: Union[str, Path]) -> FrameSettings:
    """
    Load sensor frame settings from a JSON file.

    Args:
        path: Path to the settings file.

    Returns:
        Parsed FrameSettings.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the content is not valid settings JSON.
        UnsupportedFrameError: If a frame tag is unknown.

    Example:
        >>> settings = load_frame_settings("config/frames.json")
        >>> settings.to_reference("imu_wrist", [0.1, 0.2, 9.81])
        NorthEastDown(x=0.2, y=0.1, z=-9.81)
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Frame settings file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {path}: {exc}") from exc

    return parse_frame_settings(raw)


def save_frame_settings(settings: FrameSettings, path: Union[str, Path]) -> None:
    """Write settings as JSON using CamelCase frame names."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "reference_frame": settings.reference_frame.frame_name,
        "sensors": {
            name: (
                {"frame": cfg.frame_type.frame_name, "description": cfg.description}
                if cfg.description
                else {"frame": cfg.frame_type.frame_name}
            )
            for name, cfg in settings.sensors.items()
        },
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
