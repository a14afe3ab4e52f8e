"""
Picker configuration — temperature, mixing, session, and animation parameters.

PickerConfig defaults are defined here. Callers may pass a dict
(e.g. loaded from a JSON file); from_dict() merges it with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field, model_validator


class PickerConfig(BaseModel):
    """Configuration for the smart picker and the selection session."""

    # -------------------------------------------------------------------------
    # Temperature
    # tau = max(min_temperature, base_temperature - temperature_span * (1 - adventure))
    # -------------------------------------------------------------------------

    # Lowest temperature (adventure = 0). Lower = sharper preference distribution.
    min_temperature: float = Field(default=0.15, gt=0.0)
    # Temperature at adventure = 1. Flattest pure-preference distribution.
    base_temperature: float = Field(default=0.55, gt=0.0)
    # How much the temperature drops as adventure goes from 1 to 0.
    temperature_span: float = Field(default=0.45, ge=0.0)

    # -------------------------------------------------------------------------
    # Mixing
    # mixed = max(probability_floor, (1 - adventure) * pref + adventure / n)
    # -------------------------------------------------------------------------

    # Floor for the softmax denominator when every exponential underflows.
    softmax_floor: float = Field(default=1e-12, gt=0.0)
    # Floor for each mixed probability. Keeps every option reachable.
    probability_floor: float = Field(default=1e-9, gt=0.0)

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    # Starting adventurousness for new sessions. 0 = exploit, 1 = explore.
    default_adventure: float = Field(default=0.30, ge=0.0, le=1.0)
    # Length of the no-repeat queue of recent final picks.
    recent_limit: int = Field(default=3, ge=0)
    # Score for options with no recorded outcomes (Beta mean of 0/0).
    neutral_score: float = Field(default=0.5, gt=0.0, lt=1.0)

    # -------------------------------------------------------------------------
    # Animation (presentation only, never feeds the picker)
    # rounds = min(animation_max_rounds, max(animation_min_rounds, 2 * pool_size))
    # delay_i = animation_base_delay + i * animation_delay_step  (seconds)
    # -------------------------------------------------------------------------

    animation_min_rounds: int = Field(default=6, ge=0)
    animation_max_rounds: int = Field(default=12, ge=0)
    animation_base_delay: float = Field(default=0.080, ge=0.0)
    animation_delay_step: float = Field(default=0.008, ge=0.0)

    @model_validator(mode="after")
    def temperature_range_is_ordered(self):
        if self.min_temperature > self.base_temperature:
            raise ValueError(
                f"min_temperature ({self.min_temperature}) must not exceed "
                f"base_temperature ({self.base_temperature})"
            )
        if self.animation_min_rounds > self.animation_max_rounds:
            raise ValueError(
                f"animation_min_rounds ({self.animation_min_rounds}) must not exceed "
                f"animation_max_rounds ({self.animation_max_rounds})"
            )
        return self

    def temperature(self, adventure: float) -> float:
        """Softmax temperature for an adventurousness value."""
        return max(
            self.min_temperature,
            self.base_temperature - self.temperature_span * (1.0 - adventure),
        )

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "PickerConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "temperature" in config_dict:
            t = config_dict["temperature"]
            if "min" in t:
                flat["min_temperature"] = t["min"]
            if "base" in t:
                flat["base_temperature"] = t["base"]
            if "span" in t:
                flat["temperature_span"] = t["span"]
        if "mixing" in config_dict:
            m = config_dict["mixing"]
            if "softmax_floor" in m:
                flat["softmax_floor"] = m["softmax_floor"]
            if "probability_floor" in m:
                flat["probability_floor"] = m["probability_floor"]
        if "session" in config_dict:
            flat.update(config_dict["session"])
        if "animation" in config_dict:
            a = config_dict["animation"]
            if "min_rounds" in a:
                flat["animation_min_rounds"] = a["min_rounds"]
            if "max_rounds" in a:
                flat["animation_max_rounds"] = a["max_rounds"]
            if "base_delay" in a:
                flat["animation_base_delay"] = a["base_delay"]
            if "delay_step" in a:
                flat["animation_delay_step"] = a["delay_step"]
        # Flat keys win over sectioned ones
        flat.update({k: v for k, v in config_dict.items() if not isinstance(v, dict)})
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = PickerConfig()


def resolve_config(config: Optional["PickerConfig"]) -> "PickerConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
