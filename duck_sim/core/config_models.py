"""
Pydantic models for validating the duck_config.yaml file.
"""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

# --- Logging ---

class LoggingConfig(BaseModel):
    log_dir: str = "logs"
    max_logs: int = 20
    log_to_console: bool = True

# --- Flock ---

class DuckConfig(BaseModel):
    id: str
    type: Literal["mallard", "redhead", "rubber", "decoy", "model"]
    # Optional overrides of the duck's built-in behaviours (registry names)
    quack: Optional[str] = None
    fly: Optional[str] = None

class SwapConfig(BaseModel):
    """A runtime behaviour swap, applied after the first round."""
    duck: str
    slot: Literal["quack", "fly"]
    behaviour: str

# --- Simulator ---

class SimulatorConfig(BaseModel):
    rounds: int = Field(default=2, ge=1)
    swim: bool = True

# --- Top-Level Settings Model ---

class Settings(BaseModel):
    """The root model for the entire duck_config.yaml."""
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    simulator: SimulatorConfig = Field(default_factory=SimulatorConfig)
    ducks: List[DuckConfig]
    swaps: List[SwapConfig] = Field(default_factory=list)
