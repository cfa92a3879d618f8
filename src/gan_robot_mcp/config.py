"""Robot connection settings.

Defaults match a stock GAN robot; each field can be overridden from the
environment.
"""

from __future__ import annotations

import os
import uuid
from dataclasses import dataclass

DEFAULT_NAME = "GAN-a7f13"
DEFAULT_MOVE_CHARACTERISTIC = "0000fff3-0000-1000-8000-00805f9b34fb"
DEFAULT_STATUS_CHARACTERISTIC = "0000fff2-0000-1000-8000-00805f9b34fb"

ENV_NAME = "GAN_ROBOT_NAME"
ENV_MOVE_CHARACTERISTIC = "GAN_ROBOT_MOVE_CHARACTERISTIC"
ENV_STATUS_CHARACTERISTIC = "GAN_ROBOT_STATUS_CHARACTERISTIC"


@dataclass(frozen=True)
class RobotConfig:
    """Advertised name and characteristic UUIDs of the robot."""

    name: str = DEFAULT_NAME
    move_characteristic: str = DEFAULT_MOVE_CHARACTERISTIC
    status_characteristic: str = DEFAULT_STATUS_CHARACTERISTIC

    def __post_init__(self) -> None:
        for attr in ("move_characteristic", "status_characteristic"):
            value = getattr(self, attr)
            try:
                normalized = str(uuid.UUID(value))
            except ValueError:
                raise ValueError(f"Invalid {attr} UUID: {value!r}") from None
            object.__setattr__(self, attr, normalized)

    @classmethod
    def from_env(cls, environ=None) -> RobotConfig:
        env = os.environ if environ is None else environ
        return cls(
            name=env.get(ENV_NAME, DEFAULT_NAME),
            move_characteristic=env.get(ENV_MOVE_CHARACTERISTIC, DEFAULT_MOVE_CHARACTERISTIC),
            status_characteristic=env.get(
                ENV_STATUS_CHARACTERISTIC, DEFAULT_STATUS_CHARACTERISTIC
            ),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "move_characteristic": self.move_characteristic,
            "status_characteristic": self.status_characteristic,
        }
